from enum import Enum


SETTINGS_ROW_ID = 1
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

class LessonLevelEnum(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ALL = "all"

class VideoPlatformEnum(str, Enum):
    YOUTUBE = "youtube"
    VIMEO = "vimeo"
    DRIVE = "drive"
    OTHER = "other"

class FileTypeEnum(str, Enum):
    PDF = "pdf"
    DOC = "doc"
    DOCX = "docx"
    PPT = "ppt"
    PPTX = "pptx"
    ZIP = "zip"
    RAR = "rar"

class SortEnum(str, Enum):
    RECENT = "recent"
    POPULAR = "popular"

class AnalyticsPeriodEnum(str, Enum):
    ONE_DAY = "1d"
    SEVEN_DAYS = "7d"
    THIRTY_DAYS = "30d"

class ErrorCodeEnum(str, Enum):
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    CONFLICT = "CONFLICT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
