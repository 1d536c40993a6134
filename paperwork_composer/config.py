"""
Shared configuration and constants.
"""

# Standard Library
import dataclasses
import os


POINTS_PER_INCH = 72.0
MM_PER_INCH = 25.4

# US Letter landscape, millimetres
PAGE_WIDTH = 279.4
PAGE_HEIGHT = 215.9
PAGE_BOTTOM_MARGIN = 15.0
PAGE_RIGHT_MARGIN = 10.0

DEFAULT_TEMPLATES_PATH = "./templates"
DEFAULT_ROUND_COUNT = 2
DEFAULT_HISTORY_CAP = 20
DEFAULT_QR_PIXEL_SIZE = 256

FONT_MEDIUM = "medium"
FONT_BOLD = "bold"
FONT_SEMIBOLD = "semibold"
FONT_FILES = {
	FONT_MEDIUM: ("AcuminMedium", "Acumin Pro SemiCond Medium.ttf"),
	FONT_BOLD: ("AcuminBold", "Acumin Pro Cond Bold.ttf"),
	FONT_SEMIBOLD: ("AcuminSemibold", "Acumin Pro SemiCond Semibold.ttf"),
}
FALLBACK_FONTS = {
	FONT_MEDIUM: "Helvetica",
	FONT_BOLD: "Helvetica-Bold",
	FONT_SEMIBOLD: "Helvetica-Bold",
}

PAGE_ROSTER = "roster"
PAGE_AUCTION = "auction"
PAGE_BIO_SUMMARY = "bio-summary"
PAGE_DETAIL = "detail"
BACKGROUND_FILES = {
	PAGE_ROSTER: "artist-list-bg.png",
	PAGE_AUCTION: "auction-info-bg.png",
	PAGE_BIO_SUMMARY: "bio-summary-bg.png",
	PAGE_DETAIL: "artist-page-bg.png",
}

CELL_PADDING = 1.0
TABLE_BORDER_GRAY = (200, 200, 200)
TABLE_ROW_HEIGHT = 8.0

CONTENT_LEFT = 20.0
TITLE_TOP = 20.0
TITLE_HEIGHT = 10.0
CONTENT_TOP = 40.0

ROSTER_TITLE_SIZE = 24
ROSTER_FONT_SIZE = 10
ROSTER_HEADERS = ("Round-Easel", "Artist Name")
ROSTER_COLUMN_WIDTHS = (40.0, 130.0)
ROSTER_COLUMN_ALIGNS = ("CENTER", "LEFT")

AUCTION_TITLE = "Auction & Bidding Information"
AUCTION_TITLE_SIZE = 20
AUCTION_FONT_SIZE = 9
AUCTION_HEADERS = (
	"EID-Round-Easel",
	"Artist Name",
	"# Bids",
	"Top Bid",
	"Bidder Info",
	"Payment Status",
)
AUCTION_COLUMN_WIDTHS = (40.0, 60.0, 20.0, 25.0, 60.0, 35.0)
AUCTION_COLUMN_ALIGNS = ("CENTER", "LEFT", "CENTER", "CENTER", "LEFT", "CENTER")
CURRENCY_SYMBOLS = {
	"EUR": "\u20ac",
	"GBP": "\u00a3",
}
DEFAULT_CURRENCY_SYMBOL = "$"
PLACEHOLDER = "-"

BIO_TITLE_SIZE = 24
BIO_NAME_SIZE = 12
BIO_NAME_HEIGHT = 8.0
BIO_TEXT_SIZE = 10
BIO_LINE_HEIGHT = 6.0
BIO_GAP = 4.0
NO_BIO_GAP = 10.0
NO_BIO_TEXT = "No bio available"
ADDITIONAL_BIOS_TITLE = "Additional Artist Bios"

QR_X = 20.0
QR_Y = 45.0
QR_SIZE = 42.0
NAME_X = 70.0
NAME_Y = 48.0
NAME_HEIGHT = 10.0
NAME_RIGHT_MARGIN = 20.0
NAME_MAX_SIZE = 49
NAME_MIN_SIZE = 20
NAME_SIZE_STEP = 2
DETAIL_EVENT_Y = 69.0
DETAIL_EVENT_SIZE = 18
DETAIL_EVENT_HEIGHT = 6.0
DETAIL_SLOT_Y = 77.0
DETAIL_SLOT_SIZE = 21
DETAIL_SLOT_HEIGHT = 8.0
COLUMN_TOP = 118.0
COLUMN_WIDTH = 115.0
COLUMN_GAP = 10.0
HISTORY_FONT_SIZE = 12
HISTORY_LINE_HEIGHT = 6.0
HISTORY_SUB_COLUMNS = 2
DETAIL_BIO_SIZE = 14
DETAIL_BIO_LINE_HEIGHT = 6.0

QR_FALLBACK_URL = "https://artb.art/event/{eid}"
QR_INSTAGRAM_URL = "https://instagram.com/{handle}"
OUTPUT_FILENAME = "artbattle_{eid}_paperwork.pdf"


@dataclasses.dataclass
class ComposerConfig:
	templates_path: str
	fonts_path: str
	backgrounds_path: str
	round_count: int
	history_cap: int
	qr_pixel_size: int


#============================================
def mm_to_points(value: float) -> float:
	"""
	Convert millimetres to points.

	Args:
		value: Millimetre value.

	Returns:
		Points value.
	"""
	return value * POINTS_PER_INCH / MM_PER_INCH


#============================================
def points_to_mm(value: float) -> float:
	"""
	Convert points to millimetres.
	"""
	return value * MM_PER_INCH / POINTS_PER_INCH


#============================================
def default_config() -> ComposerConfig:
	"""
	Build a config from the environment, falling back to ./templates.

	Returns:
		ComposerConfig.
	"""
	templates_path = os.environ.get("TEMPLATES_PATH") or DEFAULT_TEMPLATES_PATH
	fonts_path = os.environ.get("FONTS_PATH") or os.path.join(templates_path, "fonts")
	backgrounds_path = os.environ.get("BACKGROUNDS_PATH") or os.path.join(templates_path, "backgrounds")
	return ComposerConfig(
		templates_path=templates_path,
		fonts_path=fonts_path,
		backgrounds_path=backgrounds_path,
		round_count=DEFAULT_ROUND_COUNT,
		history_cap=DEFAULT_HISTORY_CAP,
		qr_pixel_size=DEFAULT_QR_PIXEL_SIZE,
	)
