"""Core data types for swap quoting and path selection."""

from dataclasses import dataclass
from decimal import Decimal, localcontext
from enum import Enum
from typing import Optional


class PathCategory(str, Enum):
    """How a quote's path was produced."""

    DIRECT = "direct"
    SAME_ASSET = "same_asset"
    CURATED = "curated"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class SwapStep:
    """One hop executed on one venue."""

    venue: str  # e.g., "Quickswap", "Curve"
    token_in: str
    amount_in: Decimal
    token_out: str
    amount_out: Decimal

    @property
    def effective_rate(self) -> Decimal:
        """Get effective exchange rate including fees."""
        if self.amount_in == 0:
            return Decimal("0")
        return self.amount_out / self.amount_in

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "venue": self.venue,
            "token_in": self.token_in,
            "amount_in": str(self.amount_in),
            "token_out": self.token_out,
            "amount_out": str(self.amount_out),
        }


@dataclass(frozen=True)
class RouteHop:
    """A single unpriced hop: convert into `target` on `venue`."""

    target: str
    venue: str


@dataclass(frozen=True)
class RoutePath:
    """An ordered, unpriced plan of hops starting from `source`."""

    source: str
    hops: tuple[RouteHop, ...]
    category: PathCategory
    gas_estimate: Decimal

    @property
    def destination(self) -> Optional[str]:
        return self.hops[-1].target if self.hops else None

    @property
    def intermediates(self) -> list[str]:
        return [hop.target for hop in self.hops[:-1]]

    @property
    def venues(self) -> list[str]:
        return [hop.venue for hop in self.hops]

    def validate(self, destination: str) -> None:
        """
        Check the path invariants against an expected destination.

        Raises:
            ValueError: if the path is empty, ends elsewhere, passes through
                the source or destination, or repeats an intermediate asset
        """
        if not self.hops:
            raise ValueError(f"Path from {self.source} has no hops")

        if self.destination != destination:
            raise ValueError(
                f"Path {self.source}->{destination} ends at {self.destination}"
            )

        intermediates = self.intermediates
        for asset in intermediates:
            if asset in (self.source, destination):
                raise ValueError(
                    f"Path {self.source}->{destination} passes through endpoint {asset}"
                )

        if len(set(intermediates)) != len(intermediates):
            raise ValueError(
                f"Path {self.source}->{destination} repeats an intermediate: {intermediates}"
            )


@dataclass(frozen=True)
class Quote:
    """The priced result of walking a path (or of one direct hop)."""

    from_asset: str
    to_asset: str
    from_amount: Decimal
    steps: tuple[SwapStep, ...]
    gas_estimate: Decimal
    category: PathCategory
    hop_count: int = 0  # hops planned; steps may be fewer if the path broke

    @property
    def estimated_output(self) -> Decimal:
        """Output of the last step, or the input amount for an empty path."""
        if not self.steps:
            return self.from_amount
        return self.steps[-1].amount_out

    @property
    def is_complete(self) -> bool:
        """True when every planned hop was priced with positive output."""
        return (
            bool(self.steps)
            and len(self.steps) >= self.hop_count
            and self.estimated_output > 0
        )

    @property
    def is_presented(self) -> bool:
        return False

    @property
    def venues(self) -> list[str]:
        return [step.venue for step in self.steps]

    @property
    def effective_rate(self) -> Decimal:
        if self.from_amount == 0:
            return Decimal("0")
        return self.estimated_output / self.from_amount

    def rounded_output(self, precision: int = 6) -> Decimal:
        """Estimated output quantized to `precision` decimal places."""
        return quantize(self.estimated_output, precision)

    def to_dict(self, precision: int = 6, gas_precision: int = 4) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "from_asset": self.from_asset,
            "to_asset": self.to_asset,
            "from_amount": str(self.from_amount),
            "category": self.category.value,
            "steps": [
                {
                    "venue": step.venue,
                    "token_in": step.token_in,
                    "amount_in": str(quantize(step.amount_in, precision)),
                    "token_out": step.token_out,
                    "amount_out": str(quantize(step.amount_out, precision)),
                }
                for step in self.steps
            ],
            "estimated_output": str(self.rounded_output(precision)),
            "gas_estimate": str(quantize(self.gas_estimate, gas_precision)),
            "is_complete": self.is_complete,
            "is_presented": self.is_presented,
        }


@dataclass(frozen=True)
class PresentedQuote(Quote):
    """A quote after the display-only reconciliation adjustment.

    The adjustment only touches the final step. `raw` keeps the computed
    values for anyone who needs them.
    """

    raw: Optional[Quote] = None
    adjustment: Decimal = Decimal("1")

    @property
    def is_presented(self) -> bool:
        return True

    @property
    def raw_output(self) -> Decimal:
        return self.raw.estimated_output if self.raw else self.estimated_output


@dataclass
class RouteQuotes:
    """Direct and multi-hop quotes for one request."""

    direct: Optional[Quote]
    raw: Quote
    optimal: Quote


def quantize(value: Decimal, precision: int) -> Decimal:
    """Round `value` to `precision` decimal places.

    The context precision grows with the magnitude of `value` so large
    amounts keep every integer digit.
    """
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + precision + 2)
        return value.quantize(Decimal(1).scaleb(-precision))
