"""
Partition the artist list into roster and bio-summary groups.
"""

# Standard Library
import dataclasses
import logging

# local repo modules
import paperwork_composer as pwc
import paperwork_composer.config
import paperwork_composer.models


Artist = pwc.models.Artist

DEFAULT_ROUND_COUNT = pwc.config.DEFAULT_ROUND_COUNT

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class ArtistGroups:
	roster: list[Artist]
	confirmed_only: list[Artist]
	bios_by_round: dict[int, list[Artist]]

	@property
	def additional_bios(self) -> list[Artist]:
		return self.confirmed_only

	@property
	def detail_artists(self) -> list[Artist]:
		return self.roster

	#============================================
	def round_bios(self, round_number: int) -> list[Artist]:
		"""
		Artists on the bio summary page for one round, empty if none.
		"""
		return self.bios_by_round.get(round_number, [])


#============================================
def group_artists(artists: list[Artist], round_count: int = DEFAULT_ROUND_COUNT) -> ArtistGroups:
	"""
	Split artists into the roster, per-round bio groups and additional bios.

	Confirmed-only artists go to the additional group whatever their round
	number. Everyone else is on the roster and in the bio group for their
	round. Rounds are keyed dynamically, so an artist outside
	1..round_count is still grouped and only logged.

	Args:
		artists: Artists in upstream order (round, then easel).
		round_count: Number of rounds the event is expected to have.

	Returns:
		ArtistGroups with input order preserved inside every group.
	"""
	roster: list[Artist] = []
	confirmed_only: list[Artist] = []
	by_round: dict[int, list[Artist]] = {}
	for artist in artists:
		if artist.is_confirmed_only:
			confirmed_only.append(artist)
			continue
		roster.append(artist)
		if not 1 <= artist.round_number <= round_count:
			logger.warning(
				"Artist %r has round %d outside the expected 1-%d",
				artist.resolved_name,
				artist.round_number,
				round_count,
			)
		by_round.setdefault(artist.round_number, []).append(artist)

	bios_by_round = {key: by_round[key] for key in sorted(by_round)}
	return ArtistGroups(
		roster=roster,
		confirmed_only=confirmed_only,
		bios_by_round=bios_by_round,
	)
