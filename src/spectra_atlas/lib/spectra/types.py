"""Spectrum sample model built from data-service rows."""

from dataclasses import dataclass, field
from typing import Any

from spectra_atlas.lib.spectra.parser import to_number_array

SAMPLE_NO_COLUMN = "S.No"
SAMPLE_NAME_COLUMN = "Sample name"
SHIFT_COLUMN = "Raman Shift"
INTENSITY_COLUMN = "Raman intensity"


@dataclass
class SpectrumSample:
    """One measured sample with its Raman spectrum."""

    sample_no: str
    sample_name: str | None
    raman_shift: list[float] = field(default_factory=list)
    raman_intensity: list[float] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def point_count(self) -> int:
        """Number of plottable (shift, intensity) pairs."""
        return min(len(self.raman_shift), len(self.raman_intensity))

    def to_dict(self) -> dict[str, Any]:
        return {
            "sample_no": self.sample_no,
            "sample_name": self.sample_name,
            "raman_shift": self.raman_shift,
            "raman_intensity": self.raman_intensity,
        }


def sample_from_row(row: dict[str, Any]) -> SpectrumSample:
    """Build a SpectrumSample from a raw table row."""
    name = row.get(SAMPLE_NAME_COLUMN)
    return SpectrumSample(
        sample_no=str(row.get(SAMPLE_NO_COLUMN, "")),
        sample_name=str(name) if name is not None else None,
        raman_shift=to_number_array(row.get(SHIFT_COLUMN)),
        raman_intensity=to_number_array(row.get(INTENSITY_COLUMN)),
        raw=row,
    )


def find_sample(samples: list[SpectrumSample], sample_no: str) -> SpectrumSample | None:
    """Return the sample whose number matches as a string, or None."""
    return next((s for s in samples if s.sample_no == str(sample_no)), None)
