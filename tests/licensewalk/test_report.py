"""Tests for report aggregation and writing."""

import pytest

from licensewalk.config import NO_LICENSE_FILE
from licensewalk.errors import ReportWriteError
from licensewalk.models import LicenseResolution, ModuleRecord, ResolutionKind
from licensewalk.report import build_report, summarize, write_report


def _record(name, declared=None, text=None):
    if text is None:
        resolution = LicenseResolution.not_found()
    else:
        resolution = LicenseResolution(kind=ResolutionKind.LICENSE_FILE, text=text, source="LICENSE")
    return ModuleRecord(
        name=name,
        version="1.0.0",
        registry_url=f"https://www.npmjs.com/package/{name}",
        local_path=f"node_modules/{name}",
        declared_license=declared,
        resolution=resolution,
    )


class TestClassification:

    def test_declared_without_text_is_improper_not_unlicensed(self):
        record = _record("a", declared="MIT")

        assert record.resolved_license_text == NO_LICENSE_FILE
        assert record.improperly_licensed is True
        assert record.unlicensed is False

    def test_no_declared_no_text_is_both(self):
        record = _record("b")

        assert record.improperly_licensed is True
        assert record.unlicensed is True

    def test_failed_resolution_reports_sentinel(self):
        record = _record("c")
        record.resolution = LicenseResolution.not_found(errors=("Error reading LICENSE",))

        assert record.resolution.kind == ResolutionKind.FAILED
        assert record.resolved_license_text == NO_LICENSE_FILE
        assert record.unlicensed is True

    def test_summarize(self):
        records = [_record("a", "MIT", "MIT text"), _record("b", "MIT"), _record("c")]

        summary = summarize(records)

        assert (summary.total, summary.improperly_licensed, summary.unlicensed) == (3, 2, 1)

    def test_summarize_empty(self):
        assert summarize([]).total == 0


class TestBuildReport:

    def test_layout(self):
        report = build_report("app", [_record("a", "MIT", "MIT text"), _record("b")])

        assert report == (
            "# LICENSE FILE REPORT FOR app\n"
            "## a\n\nMIT text\n"
            "## b\n\nNO LICENSE FILE\n"
        )

    def test_header_only(self):
        assert build_report("app", []) == "# LICENSE FILE REPORT FOR app\n"


class TestWriteReport:

    @pytest.mark.asyncio
    async def test_writes_file(self, temp_root):
        target = temp_root / "licenses.md"

        await write_report(target, "# report\r\nline\n")

        assert target.read_bytes() == b"# report\r\nline\n"
        assert [p.name for p in temp_root.iterdir()] == ["licenses.md"]

    @pytest.mark.asyncio
    async def test_overwrites_existing(self, temp_root):
        target = temp_root / "licenses.md"
        target.write_text("old")

        await write_report(target, "new")

        assert target.read_text() == "new"

    @pytest.mark.asyncio
    async def test_missing_directory_raises(self, temp_root):
        with pytest.raises(ReportWriteError) as exc_info:
            await write_report(temp_root / "nope" / "licenses.md", "x")

        assert exc_info.value.fatal is False

    @pytest.mark.asyncio
    async def test_directory_target_raises_and_cleans_up(self, temp_root):
        (temp_root / "out").mkdir()

        with pytest.raises(ReportWriteError):
            await write_report(temp_root / "out", "x")

        assert [p.name for p in temp_root.iterdir()] == ["out"]
