"""Batch conversion of bitmap fonts between formats."""

from __future__ import annotations

import dataclasses
import enum
import logging
import os
import traceback
from typing import TextIO

from fnttools.codec import load_font, save_font
from fnttools.models import FormatHint

logger = logging.getLogger(__name__)


class ItemOutcome(enum.Enum):
    CONVERTED = "converted"
    SKIPPED = "skipped"
    FAILED = "failed"


class BatchState(enum.Enum):
    CONTINUING = "continuing"
    ITEM_FAILED_CONTINUE = "item-failed-continue"
    ABORTED = "aborted"

    @property
    def exit_code(self) -> int:
        return 0 if self is BatchState.CONTINUING else 1


def advance(state: BatchState, outcome: ItemOutcome) -> BatchState:
    """
    Fold the outcome of one source into the batch state.

    A skipped item marks the batch as failed but lets it go on; a failed
    conversion aborts it. Once aborted, the batch stays aborted.
    """
    if state is BatchState.ABORTED or outcome is ItemOutcome.FAILED:
        return BatchState.ABORTED
    if outcome is ItemOutcome.SKIPPED:
        return BatchState.ITEM_FAILED_CONTINUE
    return state


@dataclasses.dataclass(frozen=True)
class ConvertRequest:
    sources: list[str]
    format: FormatHint
    outputs: list[str] = dataclasses.field(default_factory=list)
    overwrite: bool = False


def resolve_output(request: ConvertRequest, index: int) -> str:
    if index < len(request.outputs):
        return request.outputs[index]
    return os.path.basename(request.sources[index])


def convert_item(request: ConvertRequest, index: int, out: TextIO | None = None) -> ItemOutcome:
    source = request.sources[index]
    if not os.path.isfile(source):
        print(f'Source file "{source}" was not found. Skipping.', file=out)
        return ItemOutcome.SKIPPED

    output = resolve_output(request, index)
    if os.path.exists(output) and not request.overwrite:
        print(
            f'File "{output}" already exists. Use "--overwrite" to allow existing files to be overwritten. Skipping.',
            file=out,
        )
        return ItemOutcome.SKIPPED

    logger.debug("Converting %s to %s (%s)", source, output, request.format.value)
    try:
        font = load_font(source)
        save_font(font, output, request.format)
    except Exception:
        print(f'Failed to convert bitmap font "{source}". Aborting.', file=out)
        print(traceback.format_exc(), end="", file=out)
        return ItemOutcome.FAILED
    return ItemOutcome.CONVERTED


def convert(request: ConvertRequest, out: TextIO | None = None) -> int:
    """Convert every source in order; return the process exit code."""
    if not request.sources:
        print("No sources specified. Aborting.", file=out)
        return 1
    if request.outputs and len(request.outputs) != len(request.sources):
        print(f"{len(request.outputs)} out of {len(request.sources)} outputs specified. Aborting.", file=out)
        return 1

    state = BatchState.CONTINUING
    for index in range(len(request.sources)):
        state = advance(state, convert_item(request, index, out))
        if state is BatchState.ABORTED:
            break
    logger.debug("Batch finished as %s", state.value)
    return state.exit_code
