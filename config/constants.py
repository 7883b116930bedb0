"""
Centralized constants for DocKernel.
All fixed layout numbers live here.
"""

# ===========================================
# PAGINATION
# ===========================================
PAGE_BREAK_TOKEN = "<!-- pagebreak -->"   # shared with the editing surface
PAGINATION_SOFT_LIMIT = 1800              # characters per page (editor, most formats)
CATALOGUE_SOFT_LIMIT = 1400               # catalogue pages carry images, keep them shorter

# ===========================================
# PREFLIGHT
# ===========================================
PREFLIGHT_PAGE_TARGET = 1800              # nominal page size for the overflow check
PREFLIGHT_OVERSIZE_FACTOR = 2.0           # page > target * factor is an overflow

# ===========================================
# PREVIEW
# ===========================================
PREVIEW_DEFAULT_PAGES = 2                 # slots shown without full-book preview
PREVIEW_MIN_PAGES = 2
PREVIEW_MAX_PAGES = 24
PREVIEW_PAGE_COUNT_DEFAULT = 12           # panel slider default (range 4-40)
PREVIEW_SPREAD_GAP_PX = 24
PREVIEW_VIEWPORT_PADDING_PX = 80
ZOOM_MIN = 0.35
ZOOM_MAX = 2.5
ZOOM_FIT_MAX = 1.5

# ===========================================
# ASSETS
# ===========================================
MAX_IMPORT_SIZE_BYTES = 2 * 1024 * 1024   # editor import limit
TEXT_ASSET_MAX_CHARS = 12000              # text assets are truncated on import
IMAGE_EXTENSIONS = ['.png', '.jpg', '.jpeg', '.webp', '.gif', '.svg']
TEXT_ASSET_EXTENSIONS = [
    '.md', '.markdown', '.txt', '.csv', '.json',
    '.xml', '.html', '.htm', '.yml', '.yaml',
]
EDITOR_TEXT_EXTENSIONS = TEXT_ASSET_EXTENSIONS + ['.rtf']

# ===========================================
# EXPORT
# ===========================================
EXPORT_DEFAULT_TITLE = 'DocKernel Export'
EXPORT_TITLE_MAX_CHARS = 120
EXPORT_EMPTY_BODY = 'No content available.'
SHARE_URL_MAX_LENGTH = 7000

# ===========================================
# PRESETS
# ===========================================
PRESET_FILE = 'data/layout_presets.json'

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/dockernel.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
