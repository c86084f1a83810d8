"""Data model for a decoded gamma spectrum ``.DAT`` header.

This module defines the :class:`Record` dataclass, the single value
passed from the decoder to the ``.INP`` and dump writers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """One decoded ``.DAT`` export.

    Text fields hold trimmed strings (``""`` when the instrument left
    them blank).  Timestamps are kept as the opaque strings the
    instrument wrote; they are never parsed.  Float fields carry the
    float32 value widened to a Python ``float``.

    Attributes:
        spectrum_identifier: Spectrum id (up to 4 characters).
        sample_identifier: Free-text sample id (up to 40 characters).
        project: Project code (up to 4 characters).
        sample_location: Sampling location (up to 30 characters).
        latitude: Geodetic latitude.
        latitude_unit: Raw unit character for ``latitude``.
        longitude: Geodetic longitude.
        longitude_unit: Raw unit character for ``longitude``.
        sample_height: Sample height.
        sample_weight: Sample weight.
        sample_density: Sample density.
        sample_volume: Sample volume.
        sample_quantity: Sample quantity, in ``sample_unit``.
        sample_uncertainty: Uncertainty of ``sample_quantity``.
        sample_unit: Unit code for the sample quantity (up to 2
            characters).
        detector_identifier: Detector id (up to 2 characters).
        year: Two-digit year code.
        beaker_identifier: Beaker geometry id (up to 2 characters).
        sampling_start: Start of sampling (up to 12 characters).
        sampling_stop: End of sampling (up to 12 characters).
        reference_time: Decay reference time (up to 12 characters).
        measurement_start: Start of counting (up to 12 characters).
        measurement_stop: End of counting (up to 12 characters).
        real_time: Real (clock) time of the measurement in seconds.
        live_time: Live time of the measurement in seconds.
        measurement_time: Preset measurement time in seconds.
        dead_time: Derived dead time in percent of live time.  Not
            finite when ``live_time`` is zero.
        nuclide_library: Nuclide library file name.
        lim_file: Detection-limit library, possibly a caller default.
        channel_count: Number of spectrum channels.
        format: Spectrum data format code (up to 2 characters).
        record_length: Length of one spectrum data record.
        FWHMPS: Peak search FWHM.
        FWHMAN: Analysis FWHM.
        THRESH: Peak search threshold.
        BSTF: Background step factor.
        ETOL: Energy tolerance.
        LOCH: Lowest channel analysed.
        ICA: Calibration flag.
        energy_file: Energy calibration file name.
        pef_file: Peak efficiency file name.
        tef_file: Total efficiency file name.
        background_file: Background spectrum file name.
        PA1: Analysis parameter 1.
        PA2: Analysis parameter 2.
        PA3: Analysis parameter 3.
        PA4: Analysis parameter 4.
        PA5: Analysis parameter 5.
        PA6: Analysis parameter 6.
        print_out: Print output flag.
        plot_out: Plot output flag.
        disk_out: Disk output flag.
        ex_print_out: Extended print output flag.
        ex_disk_out: Extended disk output flag.
        PO1: Output option 1.
        PO2: Output option 2.
        PO3: Output option 3.
        PO4: Output option 4.
        PO5: Output option 5.
        PO6: Output option 6.
        complete: Non-zero once the measurement finished.
        analysed: Non-zero once the spectrum was analysed.
        ST1: Status word 1.
        ST2: Status word 2.
        ST3: Status word 3.
        ST4: Status word 4.
        ST5: Status word 5.
        ST6: Status word 6.

    The numbered parameters and the flag words are passed through as
    the instrument wrote them.
    """

    spectrum_identifier: str = ""
    sample_identifier: str = ""
    project: str = ""
    sample_location: str = ""
    latitude: float = 0.0
    latitude_unit: str = ""
    longitude: float = 0.0
    longitude_unit: str = ""
    sample_height: float = 0.0
    sample_weight: float = 0.0
    sample_density: float = 0.0
    sample_volume: float = 0.0
    sample_quantity: float = 0.0
    sample_uncertainty: float = 0.0
    sample_unit: str = ""
    detector_identifier: str = ""
    year: str = ""
    beaker_identifier: str = ""
    sampling_start: str = ""
    sampling_stop: str = ""
    reference_time: str = ""
    measurement_start: str = ""
    measurement_stop: str = ""
    real_time: int = 0
    live_time: int = 0
    measurement_time: int = 0
    dead_time: float = 0.0
    nuclide_library: str = ""
    lim_file: str = ""
    channel_count: int = 0
    format: str = ""
    record_length: int = 0
    FWHMPS: float = 0.0
    FWHMAN: float = 0.0
    THRESH: float = 0.0
    BSTF: float = 0.0
    ETOL: float = 0.0
    LOCH: float = 0.0
    ICA: int = 0
    energy_file: str = ""
    pef_file: str = ""
    tef_file: str = ""
    background_file: str = ""
    PA1: int = 0
    PA2: int = 0
    PA3: int = 0
    PA4: int = 0
    PA5: int = 0
    PA6: int = 0
    print_out: int = 0
    plot_out: int = 0
    disk_out: int = 0
    ex_print_out: int = 0
    ex_disk_out: int = 0
    PO1: int = 0
    PO2: int = 0
    PO3: int = 0
    PO4: int = 0
    PO5: int = 0
    PO6: int = 0
    complete: int = 0
    analysed: int = 0
    ST1: int = 0
    ST2: int = 0
    ST3: int = 0
    ST4: int = 0
    ST5: int = 0
    ST6: int = 0
