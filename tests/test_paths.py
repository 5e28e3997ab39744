"""Tests for path synthesis."""

from decimal import Decimal
from itertools import permutations

import pytest

from polyroute.routing.base import PathCategory, RouteHop, RoutePath
from polyroute.routing.paths import (
    CURATED_ROUTES,
    FALLBACK_VENUES,
    CuratedRoute,
    PathSynthesizer,
)
from polyroute.routing.rates import RateTable

CATALOG = RateTable().assets + ["FOO", "BAR"]


@pytest.fixture
def synthesizer() -> PathSynthesizer:
    return PathSynthesizer()


class TestSameAsset:
    """Tests for same-asset round trips."""

    @pytest.mark.parametrize("asset", CATALOG)
    def test_round_trip_shape(self, synthesizer, asset):
        """Test three hops ending where they started."""
        path = synthesizer.synthesize(asset, asset)

        assert path.category == PathCategory.SAME_ASSET
        assert len(path.hops) == 3
        assert path.destination == asset
        assert asset not in path.intermediates
        assert len(set(path.intermediates)) == 2
        assert path.venues == ["Quickswap", "Sushiswap", "Curve"]

    def test_default_bridges(self, synthesizer):
        """Test USDC and DAI bridge a non-stable asset."""
        path = synthesizer.synthesize("WETH", "WETH")

        assert path.intermediates == ["USDC", "DAI"]

    def test_bridge_skips_source(self, synthesizer):
        """Test a bridge asset equal to the source is skipped."""
        path = synthesizer.synthesize("USDC", "USDC")

        assert path.intermediates == ["DAI", "WETH"]


class TestCurated:
    """Tests for curated routes."""

    @pytest.mark.parametrize("pair", list(CURATED_ROUTES.keys()))
    def test_curated_invariants(self, synthesizer, pair):
        """Test curated routes are 3 hops, avoid the source, end at the destination."""
        asset_in, asset_out = pair
        path = synthesizer.synthesize(asset_in, asset_out)

        assert path.category == PathCategory.CURATED
        assert len(path.hops) == 3
        assert all(hop.target != asset_in for hop in path.hops)
        assert path.destination == asset_out
        path.validate(asset_out)

    def test_curated_lookup_case_insensitive(self, synthesizer):
        """Test lookup normalizes symbols."""
        path = synthesizer.synthesize("matic", "usdc")

        assert path.category == PathCategory.CURATED
        assert path.intermediates == ["WETH", "DAI"]
        assert path.venues == ["Quickswap", "Sushiswap", "Curve"]
        assert path.gas_estimate == Decimal("0.22")

    def test_is_curated(self, synthesizer):
        """Test curated pair detection."""
        assert synthesizer.is_curated("USDC", "POL")
        assert not synthesizer.is_curated("POL", "WBTC")
        assert ("MATIC", "AAVE") in synthesizer.curated_pairs()

    def test_malformed_curated_route_rejected(self):
        """Test a curated route through its own source fails at construction."""
        bad = CuratedRoute(
            hops=(RouteHop("USDC", "Quickswap"), RouteHop("WETH", "Uniswap"), RouteHop("DAI", "Curve")),
            gas_estimate=Decimal("0.2"),
        )

        with pytest.raises(ValueError):
            PathSynthesizer(curated={("USDC", "DAI"): bad})

    def test_curated_route_with_wrong_destination_rejected(self):
        """Test a curated route must end at its destination."""
        bad = CuratedRoute(
            hops=(RouteHop("WETH", "Quickswap"), RouteHop("LINK", "Uniswap"), RouteHop("USDT", "Curve")),
            gas_estimate=Decimal("0.2"),
        )

        with pytest.raises(ValueError):
            PathSynthesizer(curated={("USDC", "DAI"): bad})


class TestFallback:
    """Tests for the fallback generator."""

    def test_unknown_pair(self, synthesizer):
        """Test an unconfigured pair gets the default bridges and generic venues."""
        path = synthesizer.synthesize("FOO", "BAR")

        assert path.category == PathCategory.FALLBACK
        assert path.intermediates == ["LINK", "WETH"]
        assert path.destination == "BAR"
        assert path.venues == list(FALLBACK_VENUES)
        assert path.gas_estimate == Decimal("0.30")

    def test_source_collides_with_first_bridge(self, synthesizer):
        """Test LINK as source moves the first bridge down the priority list."""
        path = synthesizer.synthesize("LINK", "UNI")

        assert path.intermediates == ["WETH", "AAVE"]

    def test_destination_collides_with_first_bridge(self, synthesizer):
        """Test LINK as destination."""
        path = synthesizer.synthesize("WETH", "LINK")

        assert path.intermediates == ["AAVE", "DAI"]

    def test_both_preferred_bridges_are_endpoints(self, synthesizer):
        """Test both preferred bridges taken by the endpoints."""
        path = synthesizer.synthesize("LINK", "WETH")

        assert path.intermediates == ["AAVE", "DAI"]

    def test_all_uncurated_pairs_keep_invariants(self, synthesizer):
        """Test distinctness for every uncurated pair in the catalog."""
        for asset_in, asset_out in permutations(CATALOG, 2):
            if synthesizer.is_curated(asset_in, asset_out):
                continue
            path = synthesizer.synthesize(asset_in, asset_out)
            first, second = path.intermediates

            assert path.category == PathCategory.FALLBACK
            assert len(path.hops) == 3
            assert first != second
            assert {first, second}.isdisjoint({asset_in, asset_out})
            assert path.destination == asset_out

    def test_deterministic(self, synthesizer):
        """Test repeated synthesis gives the same plan."""
        assert synthesizer.synthesize("FOO", "BAR") == synthesizer.synthesize("FOO", "BAR")

    def test_short_priority_list_uses_safe_bridge(self):
        """Test the safe bridge fills in when the priority list runs out."""
        synthesizer = PathSynthesizer(bridge_priority=("LINK", "WETH", "AAVE"), safe_bridge="CRV")
        path = synthesizer.synthesize("LINK", "AAVE")

        assert path.intermediates == ["WETH", "CRV"]

    def test_safe_bridge_never_an_endpoint(self):
        """Test the safe bridge is skipped when it is the destination."""
        synthesizer = PathSynthesizer(bridge_priority=("LINK", "WETH", "AAVE"), safe_bridge="CRV")
        path = synthesizer.synthesize("LINK", "CRV")

        assert path.intermediates == ["WETH", "AAVE"]
        path.validate("CRV")

    @pytest.mark.parametrize(
        "pair",
        [("LINK", "CRV"), ("CRV", "WETH"), ("WETH", "LINK"), ("AAVE", "CRV"), ("FOO", "BAR")],
    )
    def test_smallest_bridge_set_keeps_invariants(self, pair):
        """Test four bridge candidates always leave two free intermediates."""
        synthesizer = PathSynthesizer(bridge_priority=("LINK", "WETH", "AAVE"), safe_bridge="CRV")
        asset_in, asset_out = pair
        path = synthesizer.synthesize(asset_in, asset_out)

        first, second = path.intermediates
        assert first != second
        assert {first, second}.isdisjoint({asset_in, asset_out})
        path.validate(asset_out)

    @pytest.mark.parametrize(
        "priority, safe",
        [(("LINK", "WETH"), "CRV"), (("LINK", "WETH", "CRV"), "CRV"), ((), "CRV")],
    )
    def test_too_few_bridges_rejected(self, priority, safe):
        """Test a bridge set that could collide with the endpoints fails at construction."""
        with pytest.raises(ValueError):
            PathSynthesizer(bridge_priority=priority, safe_bridge=safe)


class TestRoutePathValidation:
    """Tests for RoutePath.validate."""

    def test_empty_path(self):
        """Test an empty path is invalid."""
        path = RoutePath("USDC", (), PathCategory.FALLBACK, Decimal("0"))

        with pytest.raises(ValueError):
            path.validate("DAI")

    def test_repeated_intermediate(self):
        """Test repeated intermediates are invalid."""
        path = RoutePath(
            "USDC",
            (RouteHop("WETH", "Quickswap"), RouteHop("WETH", "Uniswap"), RouteHop("DAI", "Curve")),
            PathCategory.FALLBACK,
            Decimal("0"),
        )

        with pytest.raises(ValueError):
            path.validate("DAI")
