from pathlib import Path

import matplotlib.pyplot as plt
import matplotlib.dates as mdates
from matplotlib.dates import date2num
from matplotlib import ticker

from core.exceptions import BusinessRuleError
from core.services.workload import ResourceHistogram


class ResourceHistogramPngRenderer:
    def render(self, histogram: ResourceHistogram, output_path: Path) -> Path:
        if not histogram.days or not histogram.has_workload:
            raise BusinessRuleError(
                f"No workload to plot for resource {histogram.resource_name}.",
                code="NO_WORKLOAD",
            )

        days = [date2num(d.day) for d in histogram.days]
        loads = [d.workload_units * 100 for d in histogram.days]
        colors = ["#ef4444" if d.is_overloaded else "#4f6bed" for d in histogram.days]
        limit = histogram.capacity * 100

        fig, ax = plt.subplots(figsize=(12, 4))
        ax.bar(days, loads, width=0.8, color=colors, edgecolor="none")
        ax.axhline(limit, color="#94a3b8", linestyle="--", linewidth=1)
        ax.text(days[0], limit, f" {limit:.0f}%", color="#64748b", fontsize=8, va="bottom")

        ax.set_ylim(0, max(150.0, max(loads) * 1.1, limit * 1.1))
        ax.yaxis.set_major_formatter(ticker.PercentFormatter())

        locator = mdates.AutoDateLocator(minticks=4, maxticks=10)
        ax.xaxis.set_major_locator(locator)
        ax.xaxis.set_major_formatter(mdates.ConciseDateFormatter(locator))
        ax.xaxis.set_minor_locator(ticker.NullLocator())

        ax.set_title(f"Workload histogram: {histogram.resource_name}")
        ax.grid(True, axis="y", linestyle=":", linewidth=0.5)

        fig.tight_layout()
        fig.savefig(output_path, dpi=150)
        plt.close(fig)

        return output_path
