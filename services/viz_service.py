import io
import base64
import logging
from typing import List, Optional

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from models.common_models import ChartPayload
from models.dataset_models import ChartKind, DatasetState
from services.binder_service import bind

logger = logging.getLogger(__name__)

COLORS = ["#8884d8", "#82ca9d", "#ffc658", "#ff7c7c", "#8dd1e1", "#d084d0"]


def build_chart(state: DatasetState) -> ChartPayload:
    """
    Bind the current dataset for the renderer.

    status is "empty" when no rows are loaded and "no_suitable_columns" when an
    axis could not be chosen; records are only filled for "ready".
    """
    if not state.table.rows:
        return ChartPayload(status="empty", chart_kind=state.chart_kind)

    axes = state.axes
    if not axes.is_complete:
        return ChartPayload(
            status="no_suitable_columns",
            chart_kind=state.chart_kind,
            category_field=axes.category_column,
            value_field=axes.value_column,
        )

    records = bind(state.table, axes)
    return ChartPayload(
        status="ready",
        chart_kind=state.chart_kind,
        category_field=axes.category_column,
        value_field=axes.value_column,
        records=[r.fields for r in records],
    )


def plain_text(value) -> str:
    """Escape $ so matplotlib draws user text literally instead of as math."""
    return str(value).replace("$", r"\$")


def pie_labels(names: List[str], values: List[float]) -> List[str]:
    total = sum(values)
    if total == 0:
        return [f"{name} 0%" for name in names]
    return [f"{name} {value / total * 100:.0f}%" for name, value in zip(names, values)]


def render_chart(payload: ChartPayload) -> Optional[str]:
    """
    Draw a ready payload as a PNG and return it base64-encoded.
    Returns None if the payload is not ready or matplotlib fails.
    """
    if payload.status != "ready":
        return None

    x = payload.category_field
    y = payload.value_field
    names = [plain_text(r[x]) for r in payload.records]
    values = [float(r[y]) for r in payload.records]
    x_label, y_label = plain_text(x), plain_text(y)

    logger.debug("Rendering %s chart - x=%s y=%s points=%s", payload.chart_kind.value, x, y, len(values))

    fig, ax = plt.subplots(figsize=(8, 5))

    try:
        if payload.chart_kind == ChartKind.BAR:
            ax.bar(range(len(values)), values, color=COLORS[0], label=y_label)
            ax.set_xticks(range(len(names)))
            ax.set_xticklabels(names)
            ax.set_xlabel(x_label)
            ax.legend()

        elif payload.chart_kind == ChartKind.LINE:
            ax.plot(range(len(values)), values, color=COLORS[0], linewidth=2, label=y_label)
            ax.set_xticks(range(len(names)))
            ax.set_xticklabels(names)
            ax.set_xlabel(x_label)
            ax.grid(True, linestyle="--", alpha=0.3)
            ax.legend()

        elif payload.chart_kind == ChartKind.PIE:
            colors = [COLORS[i % len(COLORS)] for i in range(len(values))]
            ax.pie(values, labels=pie_labels(names, values), colors=colors)
            ax.axis("equal")

        buffer = io.BytesIO()
        fig.tight_layout()
        fig.savefig(buffer, format="png")
        buffer.seek(0)
        return base64.b64encode(buffer.read()).decode("utf-8")

    except Exception:
        logger.exception("Chart rendering failed for %s chart", payload.chart_kind.value)
        return None

    finally:
        plt.close(fig)
