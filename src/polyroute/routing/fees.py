"""Per-venue fee and slippage model."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


DEFAULT_FEE_FACTOR = Decimal("0.997")  # 0.3%


class VenueKind(str, Enum):
    """Fee behavior families."""

    STANDARD = "standard"
    STABLE_POOL = "stable_pool"
    GENERIC = "generic"


@dataclass(frozen=True)
class VenueProfile:
    """Fee behavior of one venue."""

    name: str
    fee_factor: Decimal = DEFAULT_FEE_FACTOR
    kind: VenueKind = VenueKind.STANDARD
    stable_fee_factor: Optional[Decimal] = None  # STABLE_POOL only, stable<->stable pairs


STABLE_ASSETS: frozenset[str] = frozenset({"USDC", "USDT", "DAI"})

# Stable pool price skew per ordered pair, replacing the table rate.
# Ordered stable pairs not listed trade at exactly 1.
STABLE_SKEW: dict[tuple[str, str], Decimal] = {
    ("USDC", "USDT"): Decimal("1.0001"),
    ("USDT", "USDC"): Decimal("0.9998"),
    ("USDC", "DAI"): Decimal("0.9999"),
    ("DAI", "USDC"): Decimal("1.0000"),
    ("DAI", "USDT"): Decimal("0.9999"),
    ("USDT", "DAI"): Decimal("1.0000"),
}

DEFAULT_VENUES: dict[str, VenueProfile] = {
    profile.name: profile
    for profile in (
        VenueProfile("Quickswap", Decimal("0.9975")),
        VenueProfile("Sushiswap", Decimal("0.997")),
        VenueProfile("Uniswap", Decimal("0.997")),
        VenueProfile(
            "Curve",
            Decimal("0.996"),
            kind=VenueKind.STABLE_POOL,
            stable_fee_factor=Decimal("0.9996"),
        ),
        VenueProfile("AavePortal", Decimal("0.9965")),
        VenueProfile("GenericDEX_A", Decimal("0.995"), kind=VenueKind.GENERIC),
        VenueProfile("GenericDEX_B", Decimal("0.995"), kind=VenueKind.GENERIC),
        VenueProfile("GenericDEX_C", Decimal("0.995"), kind=VenueKind.GENERIC),
    )
}


class VenueFeeModel:
    """Resolves fee factors in (0, 1] and stable-pool rate overrides."""

    def __init__(
        self,
        venues: Optional[dict[str, VenueProfile]] = None,
        stable_assets: frozenset[str] = STABLE_ASSETS,
        stable_skew: Optional[dict[tuple[str, str], Decimal]] = None,
        default_fee_factor: Decimal = DEFAULT_FEE_FACTOR,
    ):
        self._venues = dict(DEFAULT_VENUES if venues is None else venues)
        self.stable_assets = frozenset(asset.upper() for asset in stable_assets)
        self.stable_skew = dict(STABLE_SKEW if stable_skew is None else stable_skew)
        self.default_fee_factor = default_fee_factor

    @property
    def venues(self) -> list[VenueProfile]:
        return list(self._venues.values())

    def profile(self, venue: str) -> VenueProfile:
        """Get a venue's profile; unknown venues get the default profile."""
        profile = self._venues.get(venue)
        if profile is None:
            logger.debug(f"Unknown venue {venue}, using default fee {self.default_fee_factor}")
            return VenueProfile(venue, self.default_fee_factor)
        return profile

    def is_stable_pair(self, token_in: str, token_out: str) -> bool:
        return token_in.upper() in self.stable_assets and token_out.upper() in self.stable_assets

    def fee_factor(self, venue: str, token_in: str, token_out: str) -> Decimal:
        """Multiplicative fee factor for a hop on `venue`."""
        profile = self.profile(venue)
        if (
            profile.kind == VenueKind.STABLE_POOL
            and profile.stable_fee_factor is not None
            and self.is_stable_pair(token_in, token_out)
        ):
            return profile.stable_fee_factor
        return profile.fee_factor

    def rate_override(self, venue: str, token_in: str, token_out: str) -> Optional[Decimal]:
        """Stable pools price stable pairs near 1:1 instead of the rate table."""
        if self.profile(venue).kind != VenueKind.STABLE_POOL:
            return None
        if not self.is_stable_pair(token_in, token_out):
            return None
        return self.stable_skew.get((token_in.upper(), token_out.upper()), Decimal("1"))
