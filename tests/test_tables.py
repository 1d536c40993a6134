import pytest

import paperwork_composer.canvas
import paperwork_composer.config
import paperwork_composer.models
import paperwork_composer.tables


tables = paperwork_composer.tables
models = paperwork_composer.models


#============================================
def test_currency_symbols() -> None:
	"""
	EUR and GBP have their own symbols; everything else is a dollar.
	"""
	assert tables.currency_symbol("EUR") == "€"
	assert tables.currency_symbol("GBP") == "£"
	assert tables.currency_symbol("USD") == "$"
	assert tables.currency_symbol("CAD") == "$"
	assert tables.currency_symbol("") == "$"
	assert tables.currency_symbol("eur") == "€"


#============================================
def test_format_top_bid() -> None:
	"""
	Top bids print with no decimals; no bid prints a placeholder.
	"""
	assert tables.format_top_bid(250, "USD") == "$250"
	assert tables.format_top_bid(99.6, "EUR") == "€100"
	assert tables.format_top_bid(1200.4, "GBP") == "£1200"
	assert tables.format_top_bid(0, "USD") == "-"


#============================================
def test_roster_rows() -> None:
	"""
	Roster rows pair the round-easel label with the resolved name.
	"""
	roster = [
		models.Artist(round_number=1, easel_number=4, display_name="Jane Doe"),
		models.Artist(round_number=2, easel_number=10, first_name="Li", last_name="Wei"),
	]
	assert tables.build_roster_rows(roster) == [["1-4", "Jane Doe"], ["2-10", "Li Wei"]]


#============================================
def test_auction_rows_join_lots_by_slot() -> None:
	"""
	Ledger rows use the lot for the same round and easel.
	"""
	event = models.Event(eid="AB2995", name="Test", currency="GBP")
	roster = [
		models.Artist(round_number=1, easel_number=1, display_name="Jane Doe"),
		models.Artist(round_number=1, easel_number=2, display_name="No Lot"),
		models.Artist(round_number=2, easel_number=1, display_name="No Winner"),
	]
	lots = [
		models.AuctionLot(round_number=2, easel_number=1, bid_count=0, highest_bid=0.0),
		models.AuctionLot(
			round_number=1,
			easel_number=1,
			bid_count=3,
			highest_bid=310.0,
			winning_bid=models.Bid(amount=310.0, bidder_name="Sam", bidder_email="sam@example.com", payment_status="pending"),
		),
	]
	rows = tables.build_auction_rows(event, roster, lots)
	assert rows[0] == ["AB2995-1-1", "Jane Doe", "3", "£310", "Sam", "pending"]
	assert rows[1] == ["AB2995-1-2", "No Lot", "0", "-", "-", "-"]
	assert rows[2] == ["AB2995-2-1", "No Winner", "0", "-", "-", "-"]


#============================================
def test_layout_column_counts_must_match() -> None:
	"""
	A layout with mismatched widths is rejected.
	"""
	with pytest.raises(ValueError):
		tables.TableLayout(headers=("A", "B"), column_widths=(10.0,), column_aligns=("LEFT", "LEFT"), font_size=9)


#============================================
def test_builtin_layouts_fit_the_page() -> None:
	"""
	Both tables fit between the left content edge and the page edge.
	"""
	for layout in (tables.ROSTER_LAYOUT, tables.AUCTION_LAYOUT):
		right_edge = paperwork_composer.config.CONTENT_LEFT + layout.width
		assert right_edge <= paperwork_composer.config.PAGE_WIDTH
	assert len(tables.AUCTION_LAYOUT.headers) == 6
	assert len(tables.ROSTER_LAYOUT.headers) == 2


#============================================
def test_render_table_continues_on_new_pages() -> None:
	"""
	Rows past the bottom limit move to continuation pages with a header.
	"""
	surface = paperwork_composer.canvas.PaperworkCanvas()
	surface.new_page()
	continuation_tops: list[float] = []

	def start_continuation() -> float:
		surface.new_page()
		continuation_tops.append(40.0)
		return 40.0

	rows = [[f"1-{index}", f"Artist {index}"] for index in range(50)]
	bottom = paperwork_composer.config.PAGE_HEIGHT - paperwork_composer.config.PAGE_BOTTOM_MARGIN
	end_y = tables.render_table(
		surface,
		tables.ROSTER_LAYOUT,
		rows,
		20.0,
		40.0,
		"Helvetica-Bold",
		"Helvetica",
		bottom,
		start_continuation,
	)
	# 19 body rows fit below the header on each page: 19 + 19 + 12
	assert len(continuation_tops) == 2
	assert surface.page_count == 3
	assert end_y == pytest.approx(40.0 + 8.0 + 12 * 8.0)
	assert surface.serialize().startswith(b"%PDF")


#============================================
def test_render_table_short_table_stays_on_one_page() -> None:
	"""
	A table that fits never asks for a continuation page.
	"""
	surface = paperwork_composer.canvas.PaperworkCanvas()
	surface.new_page()

	def start_continuation() -> float:
		raise AssertionError("unexpected continuation page")

	end_y = tables.render_table(
		surface,
		tables.AUCTION_LAYOUT,
		[["AB1-1-1", "Jane", "0", "-", "-", "-"]],
		20.0,
		40.0,
		"Helvetica-Bold",
		"Helvetica",
		200.0,
		start_continuation,
	)
	assert end_y == pytest.approx(56.0)
