import logging

import paperwork_composer.grouping
import paperwork_composer.models


Artist = paperwork_composer.models.Artist
ParticipationStatus = paperwork_composer.models.ParticipationStatus
group_artists = paperwork_composer.grouping.group_artists


#============================================
def make_artist(round_number: int, easel_number: int, confirmed_only: bool = False) -> Artist:
	"""
	Build an artist named after its slot.
	"""
	status = ParticipationStatus.READY
	if confirmed_only:
		status = ParticipationStatus.CONFIRMED_ONLY
	return Artist(
		round_number=round_number,
		easel_number=easel_number,
		display_name=f"Artist {round_number}-{easel_number}",
		status=status,
	)


#============================================
def sample_artists() -> list[Artist]:
	return [
		make_artist(1, 1),
		make_artist(1, 2),
		make_artist(1, 3, confirmed_only=True),
		make_artist(2, 1),
		make_artist(2, 2, confirmed_only=True),
		make_artist(0, 0, confirmed_only=True),
		make_artist(2, 3),
	]


#============================================
def test_roster_and_confirmed_only_partition_input() -> None:
	"""
	Roster and confirmed-only are disjoint and cover every artist.
	"""
	artists = sample_artists()
	groups = group_artists(artists)
	roster_ids = {id(artist) for artist in groups.roster}
	confirmed_ids = {id(artist) for artist in groups.confirmed_only}
	assert roster_ids.isdisjoint(confirmed_ids)
	assert roster_ids | confirmed_ids == {id(artist) for artist in artists}
	assert all(not artist.is_confirmed_only for artist in groups.roster)


#============================================
def test_roster_keeps_input_order() -> None:
	"""
	The roster is not re-sorted.
	"""
	artists = [make_artist(2, 1), make_artist(1, 5), make_artist(1, 2)]
	groups = group_artists(artists)
	assert groups.roster == artists
	assert groups.detail_artists == artists


#============================================
def test_each_artist_in_at_most_one_bio_group() -> None:
	"""
	No artist appears in two bio groups.
	"""
	groups = group_artists(sample_artists())
	seen: list[int] = []
	for artists in groups.bios_by_round.values():
		seen.extend(id(artist) for artist in artists)
	seen.extend(id(artist) for artist in groups.additional_bios)
	assert len(seen) == len(set(seen))
	assert len(seen) == len(sample_artists())


#============================================
def test_confirmed_only_always_in_additional_bios() -> None:
	"""
	Confirmed-only artists go to additional bios whatever their round.
	"""
	groups = group_artists(sample_artists())
	names = [artist.resolved_name for artist in groups.additional_bios]
	assert names == ["Artist 1-3", "Artist 2-2", "Artist 0-0"]
	for artists in groups.bios_by_round.values():
		assert all(not artist.is_confirmed_only for artist in artists)


#============================================
def test_round_groups() -> None:
	"""
	Round 1 and round 2 bios follow input order.
	"""
	groups = group_artists(sample_artists())
	assert [a.resolved_name for a in groups.round_bios(1)] == ["Artist 1-1", "Artist 1-2"]
	assert [a.resolved_name for a in groups.round_bios(2)] == ["Artist 2-1", "Artist 2-3"]
	assert groups.round_bios(3) == []


#============================================
def test_rounds_beyond_configured_count_are_kept(caplog) -> None:
	"""
	A third round is grouped and logged rather than dropped.
	"""
	artists = [make_artist(3, 1), make_artist(1, 1)]
	with caplog.at_level(logging.WARNING, logger="paperwork_composer.grouping"):
		groups = group_artists(artists, round_count=2)
	assert list(groups.bios_by_round) == [1, 3]
	assert groups.round_bios(3) == [artists[0]]
	assert "outside the expected 1-2" in caplog.text

	caplog.clear()
	with caplog.at_level(logging.WARNING, logger="paperwork_composer.grouping"):
		group_artists(artists, round_count=3)
	assert caplog.text == ""


#============================================
def test_empty_input() -> None:
	"""
	No artists gives empty groups.
	"""
	groups = group_artists([])
	assert groups.roster == []
	assert groups.additional_bios == []
	assert groups.bios_by_round == {}
