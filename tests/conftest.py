"""
Pytest configuration for local imports and shared paperwork payloads.
"""

# Standard Library
import os
import sys

# PIP3 modules
import pytest

#============================================


def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()
import paperwork_composer.models


#============================================
def build_sample_payload_dict() -> dict:
	"""
	Build the AB2995 payload: one ready artist with a lot, one confirmed-only.

	Returns:
		Decoded paperwork-data JSON document.
	"""
	return {
		"event": {"eid": "AB2995", "name": "Art Battle Toronto", "currency": "USD"},
		"artists": [
			{
				"round_number": 1,
				"easel_number": 1,
				"display_name": "Jane Doe",
				"bio": "Jane paints large “expressive” portraits — mostly in oil.",
				"instagram": "@janedoe",
				"status": "ready",
				"entry_id": 101,
				"event_history": [
					{"event_eid": "AB2900", "round_number": 1, "easel_number": 3, "is_winner": True},
					{"event_eid": "AB2950", "round_number": 2, "easel_number": 5, "is_winner": False},
				],
			},
			{
				"round_number": 2,
				"easel_number": 1,
				"first_name": "John Q.",
				"last_name": "Public",
				"status": "confirmed-only",
				"entry_id": 102,
			},
		],
		"auction_lots": [
			{
				"round": 1,
				"easel_number": 1,
				"bid_count": 4,
				"highest_bid": 250,
				"winning_bid": {
					"amount": 250,
					"bidder_name": "",
					"bidder_email": "collector@example.com",
					"payment_status": "paid",
				},
				"all_bids": [
					{"amount": 100, "bidder_name": "Ann"},
					{"amount": 250, "bidder_email": "collector@example.com"},
				],
			},
		],
	}


@pytest.fixture
def sample_payload_dict() -> dict:
	return build_sample_payload_dict()


@pytest.fixture
def sample_payload() -> paperwork_composer.models.PaperworkPayload:
	return paperwork_composer.models.parse_payload(build_sample_payload_dict())
