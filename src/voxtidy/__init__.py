__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy re-exports from voxtidy.api for convenience."""
    _api_names = {
        "CommandTable",
        "InvalidInputError",
        "PipelineConfig",
        "ProcessResult",
        "process",
        "process_with_trace",
    }
    if name in _api_names:
        from voxtidy import api

        return getattr(api, name)
    raise AttributeError(f"module 'voxtidy' has no attribute {name!r}")
