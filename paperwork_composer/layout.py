"""
Shrink-to-fit sizing and condensed event-history lines.
"""

# Standard Library
import dataclasses
from typing import Callable

# local repo modules
import paperwork_composer as pwc
import paperwork_composer.config
import paperwork_composer.models


HistoryEntry = pwc.models.HistoryEntry

NAME_MAX_SIZE = pwc.config.NAME_MAX_SIZE
NAME_MIN_SIZE = pwc.config.NAME_MIN_SIZE
NAME_SIZE_STEP = pwc.config.NAME_SIZE_STEP
DEFAULT_HISTORY_CAP = pwc.config.DEFAULT_HISTORY_CAP


@dataclasses.dataclass(frozen=True)
class FitResult:
	size: float
	iterations: int
	fits: bool


#============================================
def detail_name_width() -> float:
	"""
	Width available to the artist name on a detail page, in millimetres.
	"""
	return pwc.config.PAGE_WIDTH - pwc.config.NAME_X - pwc.config.NAME_RIGHT_MARGIN


#============================================
def fit_font_size(
	measure: Callable[[float, str], float],
	text: str,
	available_width: float,
	max_size: float = NAME_MAX_SIZE,
	min_size: float = NAME_MIN_SIZE,
	step: float = NAME_SIZE_STEP,
) -> FitResult:
	"""
	Step the font size down until text fits or the floor is reached.

	The size never drops below min_size. Text still too wide at the floor
	is reported with fits=False and placed anyway by the caller.

	Args:
		measure: Callable (size, text) -> width.
		text: Text to fit.
		available_width: Width to fit into.
		max_size: Starting font size.
		min_size: Floor font size.
		step: Size decrement per iteration.

	Returns:
		FitResult with the chosen size and the number of shrink steps.
	"""
	if step <= 0:
		raise ValueError("step must be positive")
	size = max_size
	iterations = 0
	width = measure(size, text)
	while width > available_width and size > min_size:
		size = max(size - step, min_size)
		iterations += 1
		width = measure(size, text)
	return FitResult(size=size, iterations=iterations, fits=width <= available_width)


#============================================
def format_history_entry(entry: HistoryEntry) -> str:
	"""
	Format one past event as "<EID> R<round>-E<easel>", with " W" for wins.
	"""
	token = f"{entry.event_eid} R{entry.round_number}-E{entry.easel_number}"
	if entry.is_winner:
		token += " W"
	return token


#============================================
def condense_event_history(
	history: list[HistoryEntry] | tuple[HistoryEntry, ...],
	cap: int = DEFAULT_HISTORY_CAP,
) -> list[str]:
	"""
	Build the left-column history lines for a detail page.

	Args:
		history: Past event participations in upstream order.
		cap: Maximum number of events listed individually.

	Returns:
		Up to cap event lines, plus one "... and N more events" line when
		entries were left out.
	"""
	cap = max(0, cap)
	lines = [format_history_entry(entry) for entry in history[:cap]]
	remaining = len(history) - cap
	if remaining > 0:
		lines.append(f"... and {remaining} more events")
	return lines


#============================================
def history_cap_for_capacity(history_count: int, cap: int, capacity: int) -> int:
	"""
	Largest history cap whose condensed lines fit in the column.

	The summary line counts against the capacity, so an overflowing
	history keeps capacity - 1 individual events.
	"""
	if history_count <= capacity:
		return cap
	return max(0, min(cap, capacity - 1))
