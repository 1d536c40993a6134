"""
Bordered-grid table layout for the roster and auction ledger pages.
"""

# Standard Library
import dataclasses
from typing import Callable

# local repo modules
import paperwork_composer as pwc
import paperwork_composer.canvas
import paperwork_composer.config
import paperwork_composer.models


PaperworkCanvas = pwc.canvas.PaperworkCanvas
Artist = pwc.models.Artist
AuctionLot = pwc.models.AuctionLot
Event = pwc.models.Event

TABLE_ROW_HEIGHT = pwc.config.TABLE_ROW_HEIGHT
CURRENCY_SYMBOLS = pwc.config.CURRENCY_SYMBOLS
DEFAULT_CURRENCY_SYMBOL = pwc.config.DEFAULT_CURRENCY_SYMBOL
PLACEHOLDER = pwc.config.PLACEHOLDER


@dataclasses.dataclass(frozen=True)
class TableLayout:
	headers: tuple[str, ...]
	column_widths: tuple[float, ...]
	column_aligns: tuple[str, ...]
	font_size: float
	row_height: float = TABLE_ROW_HEIGHT

	def __post_init__(self) -> None:
		columns = len(self.headers)
		if len(self.column_widths) != columns or len(self.column_aligns) != columns:
			raise ValueError("headers, widths and aligns must have the same length")

	@property
	def width(self) -> float:
		return sum(self.column_widths)


ROSTER_LAYOUT = TableLayout(
	headers=pwc.config.ROSTER_HEADERS,
	column_widths=pwc.config.ROSTER_COLUMN_WIDTHS,
	column_aligns=pwc.config.ROSTER_COLUMN_ALIGNS,
	font_size=pwc.config.ROSTER_FONT_SIZE,
)

AUCTION_LAYOUT = TableLayout(
	headers=pwc.config.AUCTION_HEADERS,
	column_widths=pwc.config.AUCTION_COLUMN_WIDTHS,
	column_aligns=pwc.config.AUCTION_COLUMN_ALIGNS,
	font_size=pwc.config.AUCTION_FONT_SIZE,
)


#============================================
def draw_table_row(
	surface: PaperworkCanvas,
	layout: TableLayout,
	cells: list[str] | tuple[str, ...],
	x: float,
	y: float,
	font: str,
	align_override: str | None = None,
) -> None:
	"""
	Draw one row of bordered cells left to right.

	Args:
		surface: Page surface.
		layout: Table layout.
		cells: Cell strings, one per column.
		x: Row left edge.
		y: Row top edge.
		font: ReportLab font name.
		align_override: Alignment applied to every cell, e.g. for headers.
	"""
	cell_x = x
	for index, width in enumerate(layout.column_widths):
		text = cells[index] if index < len(cells) else ""
		align = align_override or layout.column_aligns[index]
		surface.draw_bordered_cell(
			cell_x,
			y,
			width,
			layout.row_height,
			text,
			font,
			layout.font_size,
			align=align,
		)
		cell_x += width


#============================================
def render_table(
	surface: PaperworkCanvas,
	layout: TableLayout,
	rows: list[list[str]],
	x: float,
	y: float,
	header_font: str,
	body_font: str,
	bottom_limit: float,
	start_continuation: Callable[[], float],
) -> float:
	"""
	Render a header row and body rows as a full-bordered grid.

	When the next body row would cross bottom_limit, start_continuation is
	called to open a new page; it returns the top edge for the repeated
	header row on that page.

	Args:
		surface: Page surface.
		layout: Table layout.
		rows: Body rows, each a list of cell strings.
		x: Table left edge.
		y: Table top edge.
		header_font: ReportLab font for the header row.
		body_font: ReportLab font for body rows.
		bottom_limit: Lowest allowed row bottom edge.
		start_continuation: Opens a continuation page.

	Returns:
		Top edge below the last row.
	"""
	draw_table_row(surface, layout, layout.headers, x, y, header_font, align_override="CENTER")
	y += layout.row_height
	for cells in rows:
		if y + layout.row_height > bottom_limit:
			y = start_continuation()
			draw_table_row(surface, layout, layout.headers, x, y, header_font, align_override="CENTER")
			y += layout.row_height
		draw_table_row(surface, layout, cells, x, y, body_font)
		y += layout.row_height
	return y


#============================================
def currency_symbol(currency: str) -> str:
	"""
	Map a currency code to the symbol printed before bids.
	"""
	return CURRENCY_SYMBOLS.get((currency or "").upper(), DEFAULT_CURRENCY_SYMBOL)


#============================================
def format_top_bid(amount: float, currency: str) -> str:
	"""
	Format the highest bid with no decimals, or a placeholder for no bid.

	Args:
		amount: Highest bid amount.
		currency: Event currency code.

	Returns:
		Formatted bid like "$250".
	"""
	if amount <= 0:
		return PLACEHOLDER
	return f"{currency_symbol(currency)}{amount:.0f}"


#============================================
def build_roster_rows(roster: list[Artist]) -> list[list[str]]:
	"""
	Build roster rows of round-easel label and artist name.
	"""
	rows = []
	for artist in roster:
		label = f"{artist.round_number}-{artist.easel_number}"
		rows.append([label, artist.resolved_name])
	return rows


#============================================
def build_auction_row(event: Event, artist: Artist, lot: AuctionLot | None) -> list[str]:
	"""
	Build one auction ledger row.

	Args:
		event: Event being rendered.
		artist: Roster artist.
		lot: Auction lot for the artist's slot, or None.

	Returns:
		Six cell strings.
	"""
	label = f"{event.eid}-{artist.round_number}-{artist.easel_number}"
	bid_count = "0"
	top_bid = PLACEHOLDER
	bidder_info = PLACEHOLDER
	payment_status = PLACEHOLDER
	if lot is not None:
		bid_count = str(lot.bid_count)
		top_bid = format_top_bid(lot.highest_bid, event.currency)
		if lot.winning_bid is not None:
			bidder_info = lot.winning_bid.bidder_info
			payment_status = lot.winning_bid.payment_status
	return [label, artist.resolved_name, bid_count, top_bid, bidder_info, payment_status]


#============================================
def build_auction_rows(
	event: Event,
	roster: list[Artist],
	lots: list[AuctionLot] | tuple[AuctionLot, ...],
) -> list[list[str]]:
	"""
	Join roster artists to auction lots by (round, easel).

	Args:
		event: Event being rendered.
		roster: Roster artists in order.
		lots: Auction lots.

	Returns:
		Ledger rows in roster order.
	"""
	lot_map = pwc.models.index_lots(lots)
	return [build_auction_row(event, artist, lot_map.get(artist.slot)) for artist in roster]
