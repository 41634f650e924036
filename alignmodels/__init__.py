"""
alignmodels: score and cost models for sequence alignment.
"""

# =============================================================================
# MODELS
# =============================================================================

from .models import (
    AbstractScoreModel,
    AbstractCostModel,
    AffineGapScoreModel,
    CostModel,
    score_model,
    cost_model,
)

from .submat import (
    AbstractSubstitutionMatrix,
    SubstitutionMatrix,
    DichotomousSubstitutionMatrix,
)

from .params import (
    GapParameters,
    IndelParameters,
    resolve_first,
)

from .promote import (
    promote_scalars,
    coerce_scalar,
)

from .errors import (
    ConfigurationError,
    MissingArgumentError,
)


# =============================================================================
# DEFAULTS
# =============================================================================

from .default import (
    DEFAULT_SCORE_MODEL,
    LEVENSHTEIN_COST_MODEL,
    get_default_scoring,
)


# =============================================================================
# PLOTTING (requires matplotlib -- install with pip install alignmodels[plot])
# =============================================================================

try:
    from .plot import plot_score_model
    PLOT_AVAILABLE = True
except ImportError:
    def plot_score_model(*args, **kwargs):
        raise ImportError(
            "plot_score_model requires plotting dependencies.\n"
            'Install with: pip install "alignmodels[plot]"'
        )
    PLOT_AVAILABLE = False


__all__ = [
    # Models
    "AbstractScoreModel",
    "AbstractCostModel",
    "AffineGapScoreModel",
    "CostModel",
    "score_model",
    "cost_model",
    # Substitution tables
    "AbstractSubstitutionMatrix",
    "SubstitutionMatrix",
    "DichotomousSubstitutionMatrix",
    # Argument resolution
    "GapParameters",
    "IndelParameters",
    "resolve_first",
    # Numeric promotion
    "promote_scalars",
    "coerce_scalar",
    # Errors
    "ConfigurationError",
    "MissingArgumentError",
    # Defaults
    "DEFAULT_SCORE_MODEL",
    "LEVENSHTEIN_COST_MODEL",
    "get_default_scoring",
    # Plotting
    "PLOT_AVAILABLE",
    "plot_score_model",
]
