"""Spectra library — fetch spectroscopic rows and normalise their spectra.

Public API:
    - DataServiceClient: Async REST client for table rows
    - DataServiceError: Transport/service failure
    - SpectrumSample: Parsed sample with numeric arrays
    - sample_from_row: Build a sample from a raw row
    - find_sample: Look up a sample by its number
    - to_number_array: Lenient numeric array parser
"""

from spectra_atlas.lib.spectra.client import DataServiceClient, DataServiceError
from spectra_atlas.lib.spectra.parser import to_number_array
from spectra_atlas.lib.spectra.types import SpectrumSample, find_sample, sample_from_row

__all__ = [
    "DataServiceClient",
    "DataServiceError",
    "SpectrumSample",
    "find_sample",
    "sample_from_row",
    "to_number_array",
]
