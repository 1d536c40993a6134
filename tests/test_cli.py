"""
Command line pipeline tests.
"""

# Standard Library
import json
import pathlib

# PIP3 modules
import pytest

# local repo modules
import paperwork_composer.cli


#============================================
@pytest.fixture
def clean_env(monkeypatch):
	for name in ("TEMPLATES_PATH", "FONTS_PATH", "BACKGROUNDS_PATH"):
		monkeypatch.delenv(name, raising=False)


#============================================
def write_payload(directory: pathlib.Path, payload_dict: dict, name: str) -> pathlib.Path:
	path = directory / name
	path.write_text(json.dumps(payload_dict), encoding="utf-8")
	return path


#============================================
def test_cli_writes_pdf_and_manifest(clean_env, sample_payload_dict, tmp_path: pathlib.Path, capsys) -> None:
	"""
	A payload file renders to a PDF plus a manifest beside it.
	"""
	payload_path = write_payload(tmp_path, sample_payload_dict, "payload.json")
	output_path = tmp_path / "out.pdf"
	status = paperwork_composer.cli.main([
		str(payload_path),
		"-o", str(output_path),
		"-t", str(tmp_path / "templates"),
	])
	assert status == 0
	assert output_path.read_bytes().startswith(b"%PDF")

	manifest = json.loads((tmp_path / "out.pdf.json").read_text(encoding="utf-8"))
	assert manifest["eid"] == "AB2995"
	assert manifest["artist_count"] == 2
	assert manifest["auction_lots"] == 1
	assert len(manifest["pages"]) == 5
	assert manifest["pdf_page_count"] == 5
	assert manifest["page_counts"] == {
		"roster": 1,
		"auction": 1,
		"bio-summary": 2,
		"detail": 1,
	}
	assert manifest["assets"]["fonts_path"] == str(tmp_path / "templates" / "fonts")
	assert "Pages written: 5" in capsys.readouterr().out


#============================================
def test_cli_loads_by_eid_from_payload_dir(clean_env, sample_payload_dict, tmp_path: pathlib.Path) -> None:
	"""
	--payload-dir resolves <EID>.json and honours the manifest option.
	"""
	write_payload(tmp_path, sample_payload_dict, "AB2995.json")
	output_path = tmp_path / "event.pdf"
	manifest_path = tmp_path / "manifest.json"
	status = paperwork_composer.cli.main([
		"AB2995",
		"--payload-dir", str(tmp_path),
		"-o", str(output_path),
		"-m", str(manifest_path),
		"--history-cap", "5",
	])
	assert status == 0
	assert output_path.is_file()
	manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
	assert manifest["layout"]["history_cap"] == 5
	assert manifest["output"] == str(output_path)


#============================================
def test_cli_missing_payload_returns_error(clean_env, tmp_path: pathlib.Path, capsys) -> None:
	"""
	An unknown event prints an error and exits non-zero.
	"""
	status = paperwork_composer.cli.main([
		"AB0000",
		"--payload-dir", str(tmp_path),
		"-o", str(tmp_path / "missing.pdf"),
	])
	assert status == 1
	assert "Error:" in capsys.readouterr().err
	assert not (tmp_path / "missing.pdf").exists()


#============================================
def test_cli_rejects_empty_roster(clean_env, tmp_path: pathlib.Path, capsys) -> None:
	"""
	A payload without roster artists fails without writing a PDF.
	"""
	payload = {
		"event": {"eid": "AB1", "name": "Nobody Came", "currency": "USD"},
		"artists": [],
		"auction_lots": [],
	}
	payload_path = write_payload(tmp_path, payload, "empty.json")
	status = paperwork_composer.cli.main([str(payload_path), "-o", str(tmp_path / "empty.pdf")])
	assert status == 1
	assert "Error:" in capsys.readouterr().err
	assert not (tmp_path / "empty.pdf").exists()
