"""
Compose the full event paperwork document page by page.
"""

# Standard Library
import dataclasses
import logging

# PIP3 modules
import reportlab.lib.utils

# local repo modules
import paperwork_composer as pwc
import paperwork_composer.assets
import paperwork_composer.canvas
import paperwork_composer.config
import paperwork_composer.errors
import paperwork_composer.grouping
import paperwork_composer.layout
import paperwork_composer.models
import paperwork_composer.qr
import paperwork_composer.sanitize
import paperwork_composer.tables


Artist = pwc.models.Artist
AuctionLot = pwc.models.AuctionLot
Event = pwc.models.Event
ComposerConfig = pwc.config.ComposerConfig
AssetResolver = pwc.assets.AssetResolver
PaperworkCanvas = pwc.canvas.PaperworkCanvas
EmptyRosterError = pwc.errors.EmptyRosterError
QrCodeError = pwc.errors.QrCodeError

FONT_MEDIUM = pwc.config.FONT_MEDIUM
FONT_BOLD = pwc.config.FONT_BOLD
FONT_SEMIBOLD = pwc.config.FONT_SEMIBOLD
PAGE_ROSTER = pwc.config.PAGE_ROSTER
PAGE_AUCTION = pwc.config.PAGE_AUCTION
PAGE_BIO_SUMMARY = pwc.config.PAGE_BIO_SUMMARY
PAGE_DETAIL = pwc.config.PAGE_DETAIL
PAGE_WIDTH = pwc.config.PAGE_WIDTH
PAGE_HEIGHT = pwc.config.PAGE_HEIGHT
PAGE_BOTTOM_MARGIN = pwc.config.PAGE_BOTTOM_MARGIN
PAGE_RIGHT_MARGIN = pwc.config.PAGE_RIGHT_MARGIN
CONTENT_LEFT = pwc.config.CONTENT_LEFT
CONTENT_TOP = pwc.config.CONTENT_TOP
TITLE_TOP = pwc.config.TITLE_TOP
TITLE_HEIGHT = pwc.config.TITLE_HEIGHT
NO_BIO_TEXT = pwc.config.NO_BIO_TEXT
CONTINUED_SUFFIX = " (continued)"

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class PageRecord:
	kind: str
	title: str
	artist_name: str = ""


@dataclasses.dataclass
class ComposedDocument:
	pdf_bytes: bytes
	pages: list[PageRecord]

	#============================================
	def pages_of_kind(self, kind: str) -> list[PageRecord]:
		return [page for page in self.pages if page.kind == kind]


@dataclasses.dataclass
class RenderContext:
	surface: PaperworkCanvas
	event: Event
	config: ComposerConfig
	fonts: dict[str, str]
	backgrounds: dict[str, reportlab.lib.utils.ImageReader | None]
	pages: list[PageRecord] = dataclasses.field(default_factory=list)

	@property
	def bottom_limit(self) -> float:
		return PAGE_HEIGHT - PAGE_BOTTOM_MARGIN


#============================================
def validate_payload(event: Event, artists: list[Artist] | tuple[Artist, ...]) -> None:
	"""
	Reject payloads that cannot produce a roster.

	Args:
		event: Event record.
		artists: All artists for the event.
	"""
	if not artists:
		raise EmptyRosterError(f"no artists found for event {event.eid}")
	if all(artist.is_confirmed_only for artist in artists):
		raise EmptyRosterError(f"no roster artists for event {event.eid}, only confirmed-only entries")


#============================================
def has_bio(artist: Artist) -> bool:
	"""
	True when the bio still has visible text after sanitizing.
	"""
	return bool(pwc.sanitize.sanitize_text(artist.bio).strip())


#============================================
def start_page(ctx: RenderContext, kind: str, title: str, artist_name: str = "") -> None:
	"""
	Open a page with the background for its kind and record it.
	"""
	ctx.surface.new_page(ctx.backgrounds.get(kind))
	ctx.pages.append(PageRecord(kind=kind, title=title, artist_name=artist_name))


#============================================
def place_title(ctx: RenderContext, title: str, size: float) -> None:
	ctx.surface.place_text(
		CONTENT_LEFT,
		TITLE_TOP,
		ctx.fonts[FONT_BOLD],
		size,
		title,
		height=TITLE_HEIGHT,
	)


#============================================
def add_table_page(
	ctx: RenderContext,
	kind: str,
	title: str,
	title_size: float,
	layout: pwc.tables.TableLayout,
	rows: list[list[str]],
) -> None:
	"""
	Add a titled table page, continuing on new pages when rows run out of room.

	Args:
		ctx: Render context.
		kind: Page kind for the background.
		title: Page title.
		title_size: Title font size.
		layout: Table layout.
		rows: Table body rows.
	"""
	start_page(ctx, kind, title)
	place_title(ctx, title, title_size)

	def start_continuation() -> float:
		continued = title + CONTINUED_SUFFIX
		start_page(ctx, kind, continued)
		place_title(ctx, continued, title_size)
		return CONTENT_TOP

	pwc.tables.render_table(
		ctx.surface,
		layout,
		rows,
		CONTENT_LEFT,
		CONTENT_TOP,
		ctx.fonts[FONT_SEMIBOLD],
		ctx.fonts[FONT_MEDIUM],
		ctx.bottom_limit,
		start_continuation,
	)


#============================================
def add_roster_page(ctx: RenderContext, roster: list[Artist]) -> None:
	rows = pwc.tables.build_roster_rows(roster)
	add_table_page(
		ctx,
		PAGE_ROSTER,
		ctx.event.name,
		pwc.config.ROSTER_TITLE_SIZE,
		pwc.tables.ROSTER_LAYOUT,
		rows,
	)


#============================================
def add_auction_page(ctx: RenderContext, roster: list[Artist], lots: list[AuctionLot] | tuple[AuctionLot, ...]) -> None:
	rows = pwc.tables.build_auction_rows(ctx.event, roster, lots)
	add_table_page(
		ctx,
		PAGE_AUCTION,
		pwc.config.AUCTION_TITLE,
		pwc.config.AUCTION_TITLE_SIZE,
		pwc.tables.AUCTION_LAYOUT,
		rows,
	)


#============================================
def add_bio_summary_page(ctx: RenderContext, group_title: str, artists: list[Artist]) -> None:
	"""
	Add one bio summary page, spilling onto continuation pages as needed.

	Each artist gets the name in the semibold face followed by the
	wrapped bio, or a placeholder when there is no bio.

	Args:
		ctx: Render context.
		group_title: Group title such as "Round 1 Artist Bios".
		artists: Artists in the group.
	"""
	surface = ctx.surface
	title = f"{ctx.event.name} - {group_title}"
	medium = ctx.fonts[FONT_MEDIUM]
	semibold = ctx.fonts[FONT_SEMIBOLD]
	text_width = PAGE_WIDTH - PAGE_RIGHT_MARGIN - CONTENT_LEFT
	name_height = pwc.config.BIO_NAME_HEIGHT
	line_height = pwc.config.BIO_LINE_HEIGHT
	text_size = pwc.config.BIO_TEXT_SIZE

	start_page(ctx, PAGE_BIO_SUMMARY, title)
	place_title(ctx, title, pwc.config.BIO_TITLE_SIZE)
	y = CONTENT_TOP

	def ensure_room(needed: float, current_y: float) -> float:
		if current_y + needed <= ctx.bottom_limit:
			return current_y
		continued = title + CONTINUED_SUFFIX
		start_page(ctx, PAGE_BIO_SUMMARY, continued)
		place_title(ctx, continued, pwc.config.BIO_TITLE_SIZE)
		return CONTENT_TOP

	for artist in artists:
		# keep a name together with its first bio line
		y = ensure_room(name_height + line_height, y)
		surface.place_text(
			CONTENT_LEFT,
			y,
			semibold,
			pwc.config.BIO_NAME_SIZE,
			artist.resolved_name,
			height=name_height,
		)
		y += name_height

		if not has_bio(artist):
			surface.place_text(CONTENT_LEFT, y, medium, text_size, NO_BIO_TEXT, height=line_height)
			y += pwc.config.NO_BIO_GAP
			continue

		lines = surface.wrap_text(medium, text_size, artist.bio, text_width - 2.0 * pwc.config.CELL_PADDING)
		for line in lines:
			y = ensure_room(line_height, y)
			surface.place_text(CONTENT_LEFT, y, medium, text_size, line, height=line_height, width=text_width)
			y += line_height
		y += pwc.config.BIO_GAP


#============================================
def add_bio_summary_pages(ctx: RenderContext, groups: pwc.grouping.ArtistGroups) -> None:
	"""
	Add bio summary pages: each round in ascending order, then additional.
	"""
	for round_number, artists in groups.bios_by_round.items():
		if artists:
			add_bio_summary_page(ctx, f"Round {round_number} Artist Bios", artists)
	if groups.additional_bios:
		add_bio_summary_page(ctx, pwc.config.ADDITIONAL_BIOS_TITLE, groups.additional_bios)


#============================================
def place_qr_code(ctx: RenderContext, artist: Artist) -> bool:
	"""
	Draw the detail-page QR code; a failed encode leaves the spot empty.

	Returns:
		True if a QR code was drawn.
	"""
	url = pwc.qr.resolve_qr_url(artist.instagram, ctx.event.eid)
	try:
		image = pwc.qr.generate_qr_image(url, ctx.config.qr_pixel_size)
	except QrCodeError as exc:
		logger.warning("Skipping QR code for %r: %s", artist.resolved_name, exc)
		return False
	ctx.surface.place_image(
		pwc.config.QR_X,
		pwc.config.QR_Y,
		pwc.config.QR_SIZE,
		pwc.config.QR_SIZE,
		image,
	)
	return True


#============================================
def add_detail_page(ctx: RenderContext, artist: Artist) -> None:
	"""
	Add the individual page for one roster artist.

	Args:
		ctx: Render context.
		artist: Roster artist.
	"""
	surface = ctx.surface
	name = artist.resolved_name
	bold = ctx.fonts[FONT_BOLD]
	medium = ctx.fonts[FONT_MEDIUM]
	start_page(ctx, PAGE_DETAIL, name, artist_name=name)
	place_qr_code(ctx, artist)

	available_width = pwc.layout.detail_name_width()
	fit = pwc.layout.fit_font_size(
		lambda size, text: surface.measure_width(bold, size, text),
		name,
		available_width,
	)
	if not fit.fits:
		logger.debug("Name %r overflows at %spt", name, fit.size)
	surface.place_text(
		pwc.config.NAME_X,
		pwc.config.NAME_Y,
		bold,
		fit.size,
		name,
		height=pwc.config.NAME_HEIGHT,
		width=available_width,
	)
	surface.place_text(
		pwc.config.NAME_X,
		pwc.config.DETAIL_EVENT_Y,
		medium,
		pwc.config.DETAIL_EVENT_SIZE,
		ctx.event.name,
		height=pwc.config.DETAIL_EVENT_HEIGHT,
	)
	surface.place_text(
		pwc.config.NAME_X,
		pwc.config.DETAIL_SLOT_Y,
		medium,
		pwc.config.DETAIL_SLOT_SIZE,
		f"Round {artist.round_number} - Easel {artist.easel_number}",
		height=pwc.config.DETAIL_SLOT_HEIGHT,
	)

	# left column: event history
	column_top = pwc.config.COLUMN_TOP
	column_width = pwc.config.COLUMN_WIDTH
	line_height = pwc.config.HISTORY_LINE_HEIGHT
	rows = max(1, int((ctx.bottom_limit - column_top) // line_height))
	sub_columns = pwc.config.HISTORY_SUB_COLUMNS
	sub_width = column_width / sub_columns
	cap = pwc.layout.history_cap_for_capacity(
		len(artist.event_history),
		ctx.config.history_cap,
		rows * sub_columns,
	)
	if cap < ctx.config.history_cap:
		logger.debug("History for %r limited to %d events", name, cap)
	history_lines = pwc.layout.condense_event_history(artist.event_history, cap)
	for index, line in enumerate(history_lines):
		# fill the first sub-column top to bottom, then the next
		column, row = divmod(index, rows)
		surface.place_text(
			CONTENT_LEFT + column * sub_width,
			column_top + row * line_height,
			medium,
			pwc.config.HISTORY_FONT_SIZE,
			line,
			height=line_height,
			width=sub_width,
		)

	# right column: bio
	bio_x = CONTENT_LEFT + column_width + pwc.config.COLUMN_GAP
	bio_width = PAGE_WIDTH - bio_x - pwc.config.NAME_RIGHT_MARGIN
	if has_bio(artist):
		bio_line_height = pwc.config.DETAIL_BIO_LINE_HEIGHT
		surface.place_wrapped_text(
			bio_x,
			column_top,
			bio_width,
			bio_line_height,
			medium,
			pwc.config.DETAIL_BIO_SIZE,
			artist.bio,
			max_lines=int((ctx.bottom_limit - column_top) // bio_line_height),
		)
	else:
		surface.place_text(
			bio_x,
			column_top,
			medium,
			pwc.config.DETAIL_BIO_SIZE,
			NO_BIO_TEXT,
			height=pwc.config.DETAIL_BIO_LINE_HEIGHT,
			width=bio_width,
		)


#============================================
def compose_document(
	event: Event,
	artists: list[Artist] | tuple[Artist, ...],
	lots: list[AuctionLot] | tuple[AuctionLot, ...],
	config: ComposerConfig | None = None,
	assets: AssetResolver | None = None,
) -> ComposedDocument:
	"""
	Render the paperwork PDF and the list of pages it contains.

	Page order is roster, auction ledger, bio summaries by round then
	additional, and one detail page per roster artist.

	Args:
		event: Event record.
		artists: Artists in upstream order.
		lots: Auction lots.
		config: Composer config; defaults come from the environment.
		assets: Asset resolver; defaults to the configured template folders.

	Returns:
		ComposedDocument with PDF bytes and page records.
	"""
	if config is None:
		config = pwc.config.default_config()
	if assets is None:
		assets = pwc.assets.FilesystemAssetResolver(config.fonts_path, config.backgrounds_path)
	validate_payload(event, artists)

	groups = pwc.grouping.group_artists(list(artists), config.round_count)
	ctx = RenderContext(
		surface=PaperworkCanvas(title=f"{event.name} paperwork"),
		event=event,
		config=config,
		fonts=pwc.assets.load_fonts(assets),
		backgrounds={kind: assets.load_background(kind) for kind in pwc.config.BACKGROUND_FILES},
	)

	add_roster_page(ctx, groups.roster)
	add_auction_page(ctx, groups.roster, lots)
	add_bio_summary_pages(ctx, groups)
	for artist in groups.detail_artists:
		add_detail_page(ctx, artist)

	pdf_bytes = ctx.surface.serialize()
	logger.info(
		"Generated paperwork for %s: %d pages, %d bytes",
		event.eid,
		len(ctx.pages),
		len(pdf_bytes),
	)
	return ComposedDocument(pdf_bytes=pdf_bytes, pages=ctx.pages)


#============================================
def render_paperwork(
	event: Event,
	artists: list[Artist] | tuple[Artist, ...],
	lots: list[AuctionLot] | tuple[AuctionLot, ...],
	config: ComposerConfig | None = None,
	assets: AssetResolver | None = None,
) -> bytes:
	"""
	Render the paperwork PDF bytes for one event.

	Raises:
		EmptyRosterError: No roster-eligible artists.
		PaperworkGenerationError: The PDF could not be serialized.
	"""
	document = compose_document(event, artists, lots, config=config, assets=assets)
	return document.pdf_bytes
