from archive_api.models.base import Base
from archive_api.models.category import Category
from archive_api.models.subcategory import Subcategory
from archive_api.models.folder import Folder
from archive_api.models.file import File
from archive_api.models.user import User
from archive_api.models.metric import Metric

__all__ = ["Base", "Category", "Subcategory", "Folder", "File", "User", "Metric"]
