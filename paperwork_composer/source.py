"""
Read paperwork payloads saved from the paperwork-data endpoint.
"""

# Standard Library
import json
import pathlib

# local repo modules
import paperwork_composer as pwc
import paperwork_composer.errors
import paperwork_composer.models


PaperworkPayload = pwc.models.PaperworkPayload
EventNotFoundError = pwc.errors.EventNotFoundError
PayloadError = pwc.errors.PayloadError


#============================================
def payload_path_for_eid(payload_dir: str | pathlib.Path, eid: str) -> pathlib.Path:
	"""
	Path of the saved payload for an event EID.
	"""
	return pathlib.Path(payload_dir) / f"{eid}.json"


#============================================
def load_payload_file(path: str | pathlib.Path) -> PaperworkPayload:
	"""
	Load and parse one payload JSON file.

	Args:
		path: JSON file path.

	Returns:
		PaperworkPayload.
	"""
	path = pathlib.Path(path)
	if not path.is_file():
		raise EventNotFoundError(f"event payload not found: {path}")
	text = path.read_text(encoding="utf-8")
	try:
		data = json.loads(text)
	except json.JSONDecodeError as exc:
		raise PayloadError(f"failed to parse payload {path}: {exc}") from exc
	return pwc.models.parse_payload(data)


#============================================
def load_event_payload(payload_dir: str | pathlib.Path, eid: str) -> PaperworkPayload:
	"""
	Load the payload for an event EID from a payload directory.

	Args:
		payload_dir: Directory of <EID>.json files.
		eid: Event EID.

	Returns:
		PaperworkPayload.
	"""
	if not eid:
		raise PayloadError("event EID is required")
	return load_payload_file(payload_path_for_eid(payload_dir, eid))
