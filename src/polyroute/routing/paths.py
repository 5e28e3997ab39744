"""Multi-hop path synthesis.

Every path has exactly three hops so the plan always spans three venues.
Dispatch is a single lookup on the asset pair:

- same asset: round trip through two bridge assets
- curated pair: hand-picked route from CURATED_ROUTES
- anything else: two bridge assets chosen by a fixed substitution order,
  priced on the generic fallback venues
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from polyroute.routing.base import PathCategory, RouteHop, RoutePath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CuratedRoute:
    """A known-good route for one ordered pair."""

    hops: tuple[RouteHop, ...]
    gas_estimate: Decimal


def _route(gas: str, *hops: tuple[str, str]) -> CuratedRoute:
    return CuratedRoute(
        hops=tuple(RouteHop(target=target, venue=venue) for target, venue in hops),
        gas_estimate=Decimal(gas),
    )


# Gas estimates are in POL for the whole route
CURATED_ROUTES: dict[tuple[str, str], CuratedRoute] = {
    # ========== MATIC / POL <-> stables ==========
    ("MATIC", "USDC"): _route("0.22", ("WETH", "Quickswap"), ("DAI", "Sushiswap"), ("USDC", "Curve")),
    ("USDC", "MATIC"): _route("0.22", ("DAI", "Curve"), ("WETH", "Sushiswap"), ("MATIC", "Quickswap")),
    ("POL", "USDC"): _route("0.22", ("WETH", "Quickswap"), ("DAI", "Sushiswap"), ("USDC", "Curve")),
    ("USDC", "POL"): _route("0.22", ("DAI", "Curve"), ("WETH", "Sushiswap"), ("POL", "Quickswap")),
    ("MATIC", "DAI"): _route("0.24", ("USDC", "Quickswap"), ("WETH", "Curve"), ("DAI", "Sushiswap")),
    ("DAI", "MATIC"): _route("0.24", ("WETH", "Sushiswap"), ("USDC", "Curve"), ("MATIC", "Quickswap")),
    ("POL", "DAI"): _route("0.24", ("USDC", "Quickswap"), ("WETH", "Curve"), ("DAI", "Sushiswap")),
    ("DAI", "POL"): _route("0.24", ("WETH", "Sushiswap"), ("USDC", "Curve"), ("POL", "Quickswap")),

    # ========== Stable <-> stable ==========
    ("USDC", "DAI"): _route("0.23", ("WETH", "Uniswap"), ("MATIC", "Quickswap"), ("DAI", "Sushiswap")),
    ("DAI", "USDC"): _route("0.23", ("MATIC", "Sushiswap"), ("WETH", "Quickswap"), ("USDC", "Uniswap")),

    # ========== Wrapped majors ==========
    ("WETH", "USDC"): _route("0.26", ("LINK", "Uniswap"), ("DAI", "Sushiswap"), ("USDC", "Curve")),
    ("USDC", "WETH"): _route("0.26", ("DAI", "Curve"), ("LINK", "Sushiswap"), ("WETH", "Uniswap")),
    ("WBTC", "USDC"): _route("0.27", ("WETH", "Curve"), ("LINK", "Uniswap"), ("USDC", "Sushiswap")),
    ("USDC", "WBTC"): _route("0.27", ("LINK", "Sushiswap"), ("WETH", "Uniswap"), ("WBTC", "Curve")),

    # ========== DeFi ==========
    ("MATIC", "AAVE"): _route("0.25", ("USDC", "Quickswap"), ("LINK", "Sushiswap"), ("AAVE", "AavePortal")),
    ("POL", "AAVE"): _route("0.25", ("USDC", "Quickswap"), ("LINK", "Sushiswap"), ("AAVE", "AavePortal")),
}

SAME_ASSET_BRIDGES: tuple[str, ...] = ("USDC", "DAI", "WETH")
SAME_ASSET_VENUES: tuple[str, str, str] = ("Quickswap", "Sushiswap", "Curve")
SAME_ASSET_GAS = Decimal("0.25")

FALLBACK_PREFERRED: tuple[str, str] = ("LINK", "WETH")
BRIDGE_PRIORITY: tuple[str, ...] = ("LINK", "WETH", "AAVE", "DAI", "USDC", "UNI", "CRV")
SAFE_BRIDGE = "CRV"
MIN_BRIDGE_CANDIDATES = 4
FALLBACK_PASSES = 2
FALLBACK_VENUES: tuple[str, str, str] = ("GenericDEX_A", "GenericDEX_B", "GenericDEX_C")
FALLBACK_GAS = Decimal("0.30")


class PathSynthesizer:
    """Builds a 3-hop RoutePath for any asset pair."""

    def __init__(
        self,
        curated: Optional[dict[tuple[str, str], CuratedRoute]] = None,
        bridge_priority: tuple[str, ...] = BRIDGE_PRIORITY,
        safe_bridge: str = SAFE_BRIDGE,
    ):
        source = CURATED_ROUTES if curated is None else curated
        self._curated = {
            (asset_in.upper(), asset_out.upper()): route
            for (asset_in, asset_out), route in source.items()
        }
        self.bridge_priority = tuple(bridge.upper() for bridge in bridge_priority)
        self.safe_bridge = safe_bridge.upper()
        self._validate_bridges()
        self._validate_curated()

    def _validate_bridges(self) -> None:
        # Two endpoints plus the first bridge can take at most three candidates
        candidates = set(self.bridge_priority) | {self.safe_bridge}
        if len(candidates) < MIN_BRIDGE_CANDIDATES:
            raise ValueError(
                f"Fallback bridges need at least {MIN_BRIDGE_CANDIDATES} distinct assets, "
                f"got {sorted(candidates)}"
            )

    def _validate_curated(self) -> None:
        for (asset_in, asset_out), route in self._curated.items():
            if asset_in == asset_out:
                raise ValueError(f"Curated route {asset_in}->{asset_out} is a same-asset pair")
            path = RoutePath(asset_in, route.hops, PathCategory.CURATED, route.gas_estimate)
            path.validate(asset_out)

    def is_curated(self, asset_in: str, asset_out: str) -> bool:
        return (asset_in.upper(), asset_out.upper()) in self._curated

    def curated_pairs(self) -> list[tuple[str, str]]:
        return list(self._curated.keys())

    def synthesize(self, asset_in: str, asset_out: str) -> RoutePath:
        """Plan a path from asset_in to asset_out."""
        asset_in = asset_in.upper()
        asset_out = asset_out.upper()

        if asset_in == asset_out:
            path = self._same_asset(asset_in)
        elif (asset_in, asset_out) in self._curated:
            route = self._curated[(asset_in, asset_out)]
            path = RoutePath(asset_in, route.hops, PathCategory.CURATED, route.gas_estimate)
        else:
            path = self._fallback(asset_in, asset_out)

        logger.debug(
            f"Path {asset_in}->{asset_out} ({path.category.value}): "
            f"{' -> '.join(f'{hop.target}@{hop.venue}' for hop in path.hops)}"
        )
        return path

    def _same_asset(self, asset: str) -> RoutePath:
        bridges = [bridge for bridge in SAME_ASSET_BRIDGES if bridge != asset][:2]
        targets = (bridges[0], bridges[1], asset)
        hops = tuple(RouteHop(target, venue) for target, venue in zip(targets, SAME_ASSET_VENUES))
        return RoutePath(asset, hops, PathCategory.SAME_ASSET, SAME_ASSET_GAS)

    def _pick(self, preferred: str, taken: set[str]) -> str:
        """Preferred bridge, or the first free one in priority order, then the safe bridge."""
        if preferred not in taken:
            return preferred
        for candidate in self.bridge_priority:
            if candidate not in taken:
                return candidate
        if self.safe_bridge not in taken:
            logger.warning(f"Bridge priority exhausted for {sorted(taken)}, using {self.safe_bridge}")
            return self.safe_bridge
        raise ValueError(f"No free bridge asset outside {sorted(taken)}")

    def _fallback(self, asset_in: str, asset_out: str) -> RoutePath:
        endpoints = {asset_in, asset_out}

        first = self._pick(FALLBACK_PREFERRED[0], endpoints)
        second = self._pick(FALLBACK_PREFERRED[1], endpoints | {first})

        for _ in range(FALLBACK_PASSES):
            if first in endpoints:
                first = self._pick(first, endpoints | {second})
            if second in endpoints or second == first:
                second = self._pick(second, endpoints | {first})

        targets = (first, second, asset_out)
        hops = tuple(RouteHop(target, venue) for target, venue in zip(targets, FALLBACK_VENUES))
        path = RoutePath(asset_in, hops, PathCategory.FALLBACK, FALLBACK_GAS)
        path.validate(asset_out)
        return path
