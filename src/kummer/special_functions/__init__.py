from ._exceptions import SeriesConvergenceWarning
from ._gamma import gamma
from ._hypergeometric_1_f_1 import hyp1f1, hypergeometric_1_f_1
from ._hypergeometric_1_f_1_reference import (
    REFERENCE_MAX_TERMS,
    hyp1f1_slow,
    hypergeometric_1_f_1_reference,
)
from ._hypergeometric_1_f_1_regime import (
    FAST_CONVERGENCE_RATIO,
    Hyp1F1Regime,
    classify_hypergeometric_1_f_1,
)
from ._hypergeometric_1_f_1_series import (
    EPSILON,
    PRECISION_BUDGET,
    SERIES_MAX_TERMS,
    TRACKED_SERIES_MAX_TERMS,
    hyp1f1_series,
    hyp1f1_series_track_convergence,
)
from ._pochhammer import pochhammer

__all__ = [
    "EPSILON",
    "FAST_CONVERGENCE_RATIO",
    "Hyp1F1Regime",
    "PRECISION_BUDGET",
    "REFERENCE_MAX_TERMS",
    "SERIES_MAX_TERMS",
    "SeriesConvergenceWarning",
    "TRACKED_SERIES_MAX_TERMS",
    "classify_hypergeometric_1_f_1",
    "gamma",
    "hyp1f1",
    "hyp1f1_series",
    "hyp1f1_series_track_convergence",
    "hyp1f1_slow",
    "hypergeometric_1_f_1",
    "hypergeometric_1_f_1_reference",
    "pochhammer",
]
