from collections.abc import Sequence

from glyphplot.graphs.types import present_values


def format_currency(value: float, currency: str = "$") -> str:
    return f"{currency}{value:,.2f}"


def render_summary(series: Sequence[float | None], *, currency: str = "$") -> str:
    """
    Render the statistics footer printed under a graph.

    Args:
        series: The plotted values (missing entries are ignored)
        currency: Symbol prefixed to every amount

    Returns:
        Summary text (empty when there is nothing to summarise)
    """
    values = present_values(series)
    if not values:
        return ""

    total = sum(values)
    avg = total / len(values)

    lines: list[str] = []
    lines.append(
        f"Max: {format_currency(max(values), currency)} | "
        f"Min: {format_currency(min(values), currency)} | "
        f"Avg: {format_currency(avg, currency)}"
    )
    lines.append(f"Total: {format_currency(total, currency)}")

    if len(values) >= 2:
        diff = values[-1] - values[0]
        if diff < 0:
            trend = "↓ Decreasing"  # Down arrow
        elif diff > 0:
            trend = "↑ Increasing"  # Up arrow
        else:
            trend = "→ Stable"  # Right arrow
        sign = "-" if diff < 0 else "+"
        lines.append(f"Trend: {trend} ({sign}{format_currency(abs(diff), currency)} over period)")

    return "\n".join(lines)
