"""
Event, artist and auction records read from the paperwork payload.
"""

# Standard Library
import dataclasses
import enum

# local repo modules
import paperwork_composer as pwc
import paperwork_composer.errors


PayloadError = pwc.errors.PayloadError


class ParticipationStatus(enum.Enum):
	READY = "ready"
	CONFIRMED_ONLY = "confirmed-only"

	#============================================
	@classmethod
	def from_value(cls, value: str | None) -> "ParticipationStatus":
		"""
		Map a raw status string; anything but confirmed-only counts as ready.
		"""
		if value == cls.CONFIRMED_ONLY.value:
			return cls.CONFIRMED_ONLY
		return cls.READY


@dataclasses.dataclass(frozen=True)
class Event:
	eid: str
	name: str
	currency: str = ""


@dataclasses.dataclass(frozen=True)
class HistoryEntry:
	event_eid: str
	round_number: int
	easel_number: int
	is_winner: bool = False


@dataclasses.dataclass(frozen=True)
class Artist:
	round_number: int
	easel_number: int
	display_name: str = ""
	artist_name: str = ""
	first_name: str = ""
	last_name: str = ""
	bio: str = ""
	instagram: str = ""
	status: ParticipationStatus = ParticipationStatus.READY
	entry_id: int = 0
	event_history: tuple[HistoryEntry, ...] = ()

	@property
	def resolved_name(self) -> str:
		return resolve_display_name(
			self.display_name,
			self.artist_name,
			self.first_name,
			self.last_name,
		)

	@property
	def is_confirmed_only(self) -> bool:
		return self.status is ParticipationStatus.CONFIRMED_ONLY

	@property
	def slot(self) -> tuple[int, int]:
		return (self.round_number, self.easel_number)


@dataclasses.dataclass(frozen=True)
class Bid:
	amount: float = 0.0
	bidder_name: str = ""
	bidder_email: str = ""
	payment_status: str = ""

	@property
	def bidder_info(self) -> str:
		return self.bidder_name or self.bidder_email


@dataclasses.dataclass(frozen=True)
class AuctionLot:
	round_number: int
	easel_number: int
	bid_count: int = 0
	highest_bid: float = 0.0
	winning_bid: Bid | None = None
	all_bids: tuple[Bid, ...] = ()

	@property
	def slot(self) -> tuple[int, int]:
		return (self.round_number, self.easel_number)


@dataclasses.dataclass(frozen=True)
class PaperworkPayload:
	event: Event
	artists: tuple[Artist, ...]
	auction_lots: tuple[AuctionLot, ...]


#============================================
def resolve_display_name(
	display_name: str,
	artist_name: str,
	first_name: str,
	last_name: str,
) -> str:
	"""
	Pick the name shown for an artist.

	Display name wins, then the artist/stage name, then the legal
	first and last name joined by a space. Empty parts are skipped so a
	lone first name is not padded with a trailing space.

	Args:
		display_name: Display name.
		artist_name: Artist or stage name.
		first_name: Legal first name.
		last_name: Legal last name.

	Returns:
		Resolved name, or an empty string when every source is empty.
	"""
	if display_name:
		return display_name
	if artist_name:
		return artist_name
	parts = [part for part in (first_name, last_name) if part]
	return " ".join(parts)


#============================================
def index_lots(lots: list[AuctionLot] | tuple[AuctionLot, ...]) -> dict[tuple[int, int], AuctionLot]:
	"""
	Key auction lots by (round, easel).

	Args:
		lots: Auction lots.

	Returns:
		Dict of lots keyed by slot. A later duplicate replaces an earlier one.
	"""
	lot_map: dict[tuple[int, int], AuctionLot] = {}
	for lot in lots:
		lot_map[lot.slot] = lot
	return lot_map


#============================================
def _text(data: dict, key: str) -> str:
	value = data.get(key)
	if value is None:
		return ""
	return str(value)


#============================================
def _number(data: dict, key: str, cast: type) -> int | float:
	value = data.get(key)
	if value is None or value == "":
		return cast(0)
	try:
		return cast(value)
	except (TypeError, ValueError) as exc:
		raise PayloadError(f"field {key!r} is not numeric: {value!r}") from exc


#============================================
def parse_bid(data: dict) -> Bid:
	"""
	Parse one bid record.
	"""
	return Bid(
		amount=_number(data, "amount", float),
		bidder_name=_text(data, "bidder_name"),
		bidder_email=_text(data, "bidder_email"),
		payment_status=_text(data, "payment_status"),
	)


#============================================
def parse_history_entry(data: dict) -> HistoryEntry:
	"""
	Parse one past-event participation.
	"""
	return HistoryEntry(
		event_eid=_text(data, "event_eid"),
		round_number=_number(data, "round_number", int),
		easel_number=_number(data, "easel_number", int),
		is_winner=bool(data.get("is_winner", False)),
	)


#============================================
def parse_artist(data: dict) -> Artist:
	"""
	Parse one roster entry.

	Args:
		data: Artist record from the payload.

	Returns:
		Artist.
	"""
	history = data.get("event_history") or []
	return Artist(
		round_number=_number(data, "round_number", int),
		easel_number=_number(data, "easel_number", int),
		display_name=_text(data, "display_name"),
		artist_name=_text(data, "artist_name"),
		first_name=_text(data, "first_name"),
		last_name=_text(data, "last_name"),
		bio=_text(data, "bio"),
		instagram=_text(data, "instagram"),
		status=ParticipationStatus.from_value(data.get("status")),
		entry_id=_number(data, "entry_id", int),
		event_history=tuple(parse_history_entry(entry) for entry in history),
	)


#============================================
def parse_auction_lot(data: dict) -> AuctionLot:
	"""
	Parse one auction lot.

	Args:
		data: Lot record from the payload.

	Returns:
		AuctionLot.
	"""
	winning_bid = None
	if data.get("winning_bid"):
		winning_bid = parse_bid(data["winning_bid"])
	all_bids = data.get("all_bids") or []
	return AuctionLot(
		round_number=_number(data, "round", int),
		easel_number=_number(data, "easel_number", int),
		bid_count=_number(data, "bid_count", int),
		highest_bid=_number(data, "highest_bid", float),
		winning_bid=winning_bid,
		all_bids=tuple(parse_bid(bid) for bid in all_bids),
	)


#============================================
def parse_payload(data: dict) -> PaperworkPayload:
	"""
	Build typed records from the paperwork-data JSON document.

	Args:
		data: Decoded JSON payload with event, artists and auction_lots.

	Returns:
		PaperworkPayload.
	"""
	if not isinstance(data, dict):
		raise PayloadError("payload must be a JSON object")
	event_data = data.get("event")
	if not isinstance(event_data, dict):
		raise PayloadError("payload has no event object")
	event = Event(
		eid=_text(event_data, "eid"),
		name=_text(event_data, "name"),
		currency=_text(event_data, "currency"),
	)
	artists = tuple(parse_artist(entry) for entry in data.get("artists") or [])
	lots = tuple(parse_auction_lot(entry) for entry in data.get("auction_lots") or [])
	return PaperworkPayload(event=event, artists=artists, auction_lots=lots)
