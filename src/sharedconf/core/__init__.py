from sharedconf.core.merger import deep_merge, merge_configs
from sharedconf.core.resolver import ResolutionKind, ResolutionResult, resolve

__all__ = [
    "deep_merge",
    "merge_configs",
    "ResolutionKind",
    "ResolutionResult",
    "resolve",
]
