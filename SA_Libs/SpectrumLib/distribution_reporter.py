"""
Distribution reporting for aggregated colors.

Turns aggregated color counts into wavelength-ordered ColorRecords and a
commentary string describing the distribution.

Two distinct notions of a "top" color exist and are kept apart:
    - the longest-wavelength record (first after sorting), which drives the
      commentary rules
    - the highest-count record, which drives the color quiz

Classes:
    SpectrumReport: Immutable result of one analysis pass

Functions:
    build_color_records: Build and sort ColorRecords from ColorCounts
    longest_wavelength_record: First record of the wavelength-sorted sequence
    highest_count_record: Record with the largest pixel count
    generate_commentary: Pick the commentary for a record sequence
    build_report: Records plus commentary in one SpectrumReport
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from SA_Libs.constants import (
    DOMINANCE_COMMENT_TEMPLATE,
    DOMINANCE_PERCENT_THRESHOLD,
    EMPTY_IMAGE_COMMENT,
    FLAVOR_COMMENTS,
    MINIMALIST_COMMENT,
    MINIMALIST_DISTINCT_THRESHOLD,
    RAINBOW_DISTINCT_THRESHOLD,
    RAINBOW_EXPLOSION_COMMENT,
    SUMMARY_COMMENT_TEMPLATE,
)
from SA_Libs.SpectrumLib.color_models import ColorCounts, ColorRecord, rgb_to_hex
from SA_Libs.SpectrumLib.wavelength_classifier import get_color_name, rgb_to_wavelength

logger = logging.getLogger(__name__)

# Picks one flavor phrase; random.choice by default, pinned in tests
ChoiceFunction = Callable[[Sequence[str]], str]


def build_color_records(color_counts: ColorCounts) -> List[ColorRecord]:
    """
    Build one ColorRecord per aggregated color, sorted by wavelength descending.

    The sort is stable: colors with equal wavelengths keep the order in which
    they were first encountered in the image.

    Args:
        color_counts: Output of the pixel aggregator

    Returns:
        Records ordered from the red end to the violet end
    """
    total = color_counts.total_pixels
    records = []
    for (r, g, b), count in color_counts.counts.items():
        records.append(
            ColorRecord(
                rgb=(r, g, b),
                hex=rgb_to_hex(r, g, b),
                count=count,
                percentage=(count / total) * 100,
                wavelength=rgb_to_wavelength(r, g, b),
            )
        )

    records.sort(key=lambda record: record.wavelength, reverse=True)
    return records


def longest_wavelength_record(records: Sequence[ColorRecord]) -> Optional[ColorRecord]:
    return records[0] if records else None


def highest_count_record(records: Sequence[ColorRecord]) -> Optional[ColorRecord]:
    """Return the record with the most pixels; the earliest one wins ties."""
    best: Optional[ColorRecord] = None
    for record in records:
        if best is None or record.count > best.count:
            best = record
    return best


def generate_commentary(
    records: Sequence[ColorRecord],
    choice: ChoiceFunction = random.choice,
) -> str:
    """
    Describe a wavelength-sorted record sequence.

    Rules, first match wins:
        1. longest-wavelength record covers more than 50% -> dominance message
        2. more than 100 distinct colors -> rainbow explosion message
        3. fewer than 10 distinct colors -> minimalist message
        4. a flavor phrase chosen by `choice`, plus the distinct count and the
           wavelength range

    An empty sequence yields a neutral empty-state message.

    Args:
        records: Records sorted by wavelength descending
        choice: Selects one phrase from a sequence of flavor phrases

    Returns:
        The commentary string
    """
    dominant = longest_wavelength_record(records)
    if dominant is None:
        return EMPTY_IMAGE_COMMENT

    if dominant.percentage > DOMINANCE_PERCENT_THRESHOLD:
        return DOMINANCE_COMMENT_TEMPLATE.format(
            name=get_color_name(dominant.wavelength).lower(),
            percentage=dominant.percentage,
        )

    distinct = len(records)
    if distinct > RAINBOW_DISTINCT_THRESHOLD:
        return RAINBOW_EXPLOSION_COMMENT

    if distinct < MINIMALIST_DISTINCT_THRESHOLD:
        return MINIMALIST_COMMENT

    return SUMMARY_COMMENT_TEMPLATE.format(
        flavor=choice(FLAVOR_COMMENTS),
        count=distinct,
        shortest=records[-1].wavelength,
        longest=dominant.wavelength,
    )


@dataclass(frozen=True)
class SpectrumReport:
    """Result of analysing one image.

    Attributes:
        records: ColorRecords sorted by wavelength descending
        commentary: Summary of the distribution
        total_pixels: Number of pixels analysed
    """

    records: Tuple[ColorRecord, ...]
    commentary: str
    total_pixels: int

    @property
    def distinct_count(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

    def longest_wavelength_record(self) -> Optional[ColorRecord]:
        return longest_wavelength_record(self.records)

    def highest_count_record(self) -> Optional[ColorRecord]:
        return highest_count_record(self.records)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "commentary": self.commentary,
            "total_pixels": self.total_pixels,
            "distinct_count": self.distinct_count,
            "colors": [record.to_dict() for record in self.records],
        }


def build_report(
    color_counts: ColorCounts,
    choice: ChoiceFunction = random.choice,
) -> SpectrumReport:
    records = build_color_records(color_counts)
    commentary = generate_commentary(records, choice=choice)
    logger.debug(f"Built report with {len(records)} records: {commentary}")
    return SpectrumReport(
        records=tuple(records),
        commentary=commentary,
        total_pixels=color_counts.total_pixels,
    )
