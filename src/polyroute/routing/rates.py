"""Static exchange-rate table for the Polygon asset catalog."""

import logging
from decimal import Decimal
from typing import Optional

logger = logging.getLogger(__name__)


# Units of the second asset per unit of the first, before fees.
# Only one direction of each pair is listed; the other resolves to the reciprocal.
# Illustrative values for quoting demos, not market data.
DEFAULT_RATES: dict[tuple[str, str], Decimal] = {
    # ========== Stablecoins ==========
    ("USDC", "USDT"): Decimal("0.9999"),
    ("USDC", "DAI"): Decimal("0.9998"),
    ("USDT", "DAI"): Decimal("0.9999"),

    # ========== Polygon native ==========
    ("USDC", "POL"): Decimal("5.26"),
    ("USDT", "POL"): Decimal("5.25"),
    ("DAI", "POL"): Decimal("5.255"),
    ("USDC", "MATIC"): Decimal("5.26"),
    ("USDT", "MATIC"): Decimal("5.25"),
    ("DAI", "MATIC"): Decimal("5.255"),
    ("POL", "MATIC"): Decimal("1.0"),  # MATIC was renamed POL 1:1

    # ========== Wrapped majors ==========
    ("WETH", "USDC"): Decimal("3500.00"),
    ("WETH", "USDT"): Decimal("3498.50"),
    ("WETH", "DAI"): Decimal("3501.20"),
    ("WETH", "POL"): Decimal("18400.0"),
    ("WETH", "MATIC"): Decimal("18400.0"),
    ("WBTC", "USDC"): Decimal("65000.00"),
    ("WBTC", "USDT"): Decimal("64980.00"),
    ("WBTC", "WETH"): Decimal("18.57"),

    # ========== DeFi tokens ==========
    ("LINK", "USDC"): Decimal("14.20"),
    ("LINK", "DAI"): Decimal("14.19"),
    ("LINK", "WETH"): Decimal("0.00406"),
    ("LINK", "POL"): Decimal("74.60"),
    ("LINK", "MATIC"): Decimal("74.60"),
    ("AAVE", "USDC"): Decimal("95.00"),
    ("AAVE", "WETH"): Decimal("0.0271"),
    ("AAVE", "LINK"): Decimal("6.69"),
    ("UNI", "USDC"): Decimal("7.50"),
    ("UNI", "WETH"): Decimal("0.00214"),
    ("CRV", "USDC"): Decimal("0.35"),
    ("CRV", "WETH"): Decimal("0.0001"),
}

# Used when neither direction of a pair is listed. Below every modeled rate
# and every reciprocal of one.
FALLBACK_RATE = Decimal("0.00001")


class RateTable:
    """Bidirectional rate lookup over a directed rate map."""

    def __init__(
        self,
        rates: Optional[dict[tuple[str, str], Decimal]] = None,
        fallback_rate: Decimal = FALLBACK_RATE,
    ):
        source = DEFAULT_RATES if rates is None else rates
        self._rates = {
            (asset_in.upper(), asset_out.upper()): Decimal(rate)
            for (asset_in, asset_out), rate in source.items()
        }
        self.fallback_rate = fallback_rate

    @property
    def assets(self) -> list[str]:
        """All asset symbols appearing in the table, sorted."""
        symbols = set()
        for asset_in, asset_out in self._rates:
            symbols.add(asset_in)
            symbols.add(asset_out)
        return sorted(symbols)

    def has_pair(self, asset_in: str, asset_out: str) -> bool:
        """Check whether either direction of the pair is listed."""
        asset_in = asset_in.upper()
        asset_out = asset_out.upper()
        return (asset_in, asset_out) in self._rates or (asset_out, asset_in) in self._rates

    def rate(self, asset_in: str, asset_out: str) -> Decimal:
        """
        Resolve units of asset_out per unit of asset_in.

        Never fails: an unknown pair resolves to the fallback rate.
        """
        asset_in = asset_in.upper()
        asset_out = asset_out.upper()

        if asset_in == asset_out:
            return Decimal("1")

        direct = self._rates.get((asset_in, asset_out))
        if direct is not None:
            return direct

        reverse = self._rates.get((asset_out, asset_in))
        if reverse is not None and reverse > 0:
            return Decimal("1") / reverse

        logger.debug(f"No rate for {asset_in}->{asset_out}, using fallback {self.fallback_rate}")
        return self.fallback_rate
