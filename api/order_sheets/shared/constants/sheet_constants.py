"""
Constantes del layout de la hoja de una orden.

El orden de BASE_HEADERS define los indices de columna que usan el
formateador y las validaciones; si cambia uno, cambian los otros.
"""
from enum import Enum


class ImageCellMode(str, Enum):
    """Forma de renderizar las celdas de imagen."""
    FORMULA = "formula"  # =IMAGE("<url>"), requiere USER_ENTERED
    URL = "url"          # URL plana, se escribe en RAW


# Caracteres no permitidos en el titulo de una pestana
FORBIDDEN_TITLE_CHARS = "[]*/\\?:"
MAX_TITLE_LENGTH = 100
FALLBACK_SHEET_TITLE = "Order"

BASE_HEADERS = [
    "اسم الطلبية",
    "رقم المشترى",
    "اسم الزبون",
    "العدد",
    "السعر",
    "مكان الاستلام",
    "ملاحظة",
    "تم الاستلام",
    "تاريخ الاستلام",
    "تم التحصيل",
    "تاريخ التحصيل",
    "روابط",
]
IMAGE_HEADER = "صور"

TRUE_TOKEN = "نعم"
FALSE_TOKEN = "لا"

LINKS_SEPARATOR = "\n"

PICKUP_COLUMN_INDEX = 5
PICKED_UP_AT_COLUMN_INDEX = 8
COLLECTED_AT_COLUMN_INDEX = 10

PICKUP_POINT_OPTIONS = [
    "من البيت",
    "من نقطة الاستلام",
    "توصيل",
]

DATE_TIME_PATTERN = "yyyy-mm-dd hh:mm"

STORAGE_PUBLIC_PATH = "storage/v1/object/public"
