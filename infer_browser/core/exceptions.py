class InferBrowserError(Exception):
    """Base exception for all infer_browser errors"""
    pass

class ConfigError(InferBrowserError):
    """Invalid or unreadable global.json"""
    pass

class ModelLoadError(InferBrowserError):
    """Model artifact missing or rejected by the runtime"""
    pass

class InputParseError(InferBrowserError):
    """Typed input does not yield a usable vector"""
    pass

class InputShapeError(InputParseError):
    """
    Vector width doesn't match the fixed input width declared by the model
    """
    pass

class PredictionError(InferBrowserError):
    """Forward pass failed inside the runtime"""
    pass
