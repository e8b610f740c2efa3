"""
Content Configuration
Fixed vocabularies shared by the document library and the role model.
"""

# E-learning document categories (value -> display label)
DOCUMENT_CATEGORIES = [
    {"value": "general", "label": "Chung"},
    {"value": "programming", "label": "Lập trình"},
    {"value": "design", "label": "Thiết kế"},
    {"value": "business", "label": "Kinh doanh"},
    {"value": "tutorial", "label": "Hướng dẫn"},
    {"value": "resource", "label": "Tài nguyên"},
]

DEFAULT_DOCUMENT_CATEGORY = "general"

# Values of the app_role enum in user_roles
APP_ROLES = ["admin", "user"]


def get_category_label(value: str) -> str:
    """Display label for a category; unknown values are shown as-is"""
    for category in DOCUMENT_CATEGORIES:
        if category["value"] == value:
            return category["label"]
    return value
