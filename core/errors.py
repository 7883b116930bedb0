"""
DocKernel error hierarchy.

The pagination and preflight core never raises; these errors belong to the
collaborators around it (asset import, presets, templates, share payloads).
The API layer maps them to HTTP responses.
"""


class DocKernelError(Exception):
    """Base exception for DocKernel errors"""
    pass


class AssetImportError(DocKernelError):
    """Raised when a file cannot be imported into a document"""
    pass


class AssetTooLargeError(AssetImportError):
    """Imported file exceeds the size limit"""

    def __init__(self, filename: str, size: int, limit: int):
        self.filename = filename
        self.size = size
        self.limit = limit
        super().__init__(
            f"File too large: {filename} is {size} bytes, limit is {limit} bytes"
        )


class UnsupportedAssetError(AssetImportError):
    """Imported file type is not supported"""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(
            f"Unsupported format: {filename}. "
            "Use text files or images (png, jpg, webp, gif, svg)."
        )


class PresetNotFoundError(DocKernelError):
    """No preset with the requested id"""

    def __init__(self, preset_id: str):
        self.preset_id = preset_id
        super().__init__(f"Preset not found: {preset_id}")


class TemplateNotFoundError(DocKernelError):
    """No template with the requested id"""

    def __init__(self, template_id: str, available=None):
        self.template_id = template_id
        self.available = list(available or [])
        super().__init__(
            f"Unknown template: '{template_id}'. "
            f"Available templates: {self.available}"
        )


class SharePayloadError(DocKernelError):
    """Share payload could not be built"""
    pass
