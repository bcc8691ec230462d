"""
Policy layer.

Rules applied to raw API traffic before anything reaches callers:
- response_wrappers: envelope unwrapping, field coercion, contract model building
- error_translation: mapping transport / HTTP failures onto the error taxonomy
"""
