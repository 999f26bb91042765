"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

# Features an admin may open. Anything else is denied, including feature
# names added later.
ADMIN_FEATURES = frozenset(
    {
        "dashboard",
        "organisasi",
        "users",
        "manage_class_masters",
        "manage_classes",
    }
)

# Features reported by the /api/access/me endpoint.
KNOWN_FEATURES = (
    "dashboard",
    "organisasi",
    "users",
    "manage_class_masters",
    "manage_classes",
    "absensi",
    "laporan",
    "materi",
    "rapot",
)

ORG_FIELDS = ("daerah_id", "desa_id", "kelompok_id")

TEACHER_CLASS_KEYWORD = "pengajar"
CABERAWIT_CATEGORY_CODES = frozenset({"CABERAWIT", "PAUD"})

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DEFAULT_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
