"""Tests for the measure-then-clean engine."""

from __future__ import annotations

from reclaim.core.catalog import firefox_profiles_root
from reclaim.core.engine import ReclaimEngine
from reclaim.models.clean_result import OutcomeStatus
from reclaim.models.target import TargetKind


def _populate(loc, write_file):
    write_file(loc.system_root / "Prefetch" / "APP.EXE-1234.pf", 1000)
    write_file(loc.temp / "setup" / "installer.tmp", 2000)
    write_file(loc.system_root / "SoftwareDistribution" / "Download" / "kb" / "update.cab", 3000)
    write_file(loc.system_drive / "Windows.old" / "Windows" / "notepad.exe", 4000)
    write_file(loc.system_root / "Minidump" / "011024-01.dmp", 500)
    write_file(loc.system_root / "MEMORY.DMP", 6000)


class TestReclaimEngine:
    def test_empty_system(self, locations):
        report = ReclaimEngine(locations).run()

        assert report.total_bytes == 0
        assert report.failures == []
        assert report.partials == []
        for outcome in report.outcomes:
            if outcome.target.kind is TargetKind.RECREATE_DIRECTORY:
                assert outcome.status is OutcomeStatus.SUCCESS
            else:
                assert outcome.status is OutcomeStatus.SKIPPED

    def test_full_run(self, locations, write_file):
        _populate(locations, write_file)
        report = ReclaimEngine(locations).run()

        # user temp is listed twice (TEMP and LOCALAPPDATA\Temp) and measured twice
        assert report.total_bytes == 1000 + 2000 * 2 + 3000 + 4000 + 500 + 6000
        assert report.failures == []

        for target in report.catalog:
            if target.kind is TargetKind.RECREATE_DIRECTORY:
                assert target.path.is_dir()
                assert not any(target.path.iterdir())
            else:
                assert not target.path.exists()

    def test_second_run_is_clean(self, locations, write_file):
        _populate(locations, write_file)
        engine = ReclaimEngine(locations)
        engine.run()
        report = engine.run()

        assert report.total_bytes == 0
        assert report.failures == []
        assert report.partials == []

    def test_profile_scenario(self, locations, write_file):
        root = firefox_profiles_root(locations)
        (root / "empty.default").mkdir(parents=True)
        write_file(root / "busy.default-release" / "cache2" / "entries" / "ABCDEF", 7777)

        engine = ReclaimEngine(locations)
        catalog = engine.build_catalog()
        cache_paths = {t.path for t in catalog if t.path.name == "cache2"}
        assert cache_paths == {
            root / "empty.default" / "cache2",
            root / "busy.default-release" / "cache2",
        }

        report = engine.run()

        assert report.total_bytes == 7777
        for path in cache_paths:
            assert path.is_dir()
            assert not any(path.iterdir())

    def test_measures_before_cleaning(self, locations, write_file):
        _populate(locations, write_file)
        events: list[str] = []
        ReclaimEngine(locations).run(on_progress=lambda name, status: events.append(status))

        last_measure = max(i for i, s in enumerate(events) if s == "measuring")
        first_clean = events.index("cleaning")
        assert last_measure < first_clean

    def test_outcome_callback(self, locations):
        received = []
        report = ReclaimEngine(locations).run(on_outcome=received.append)
        assert received == report.outcomes
        assert len(received) == len(report.catalog)

    def test_failure_counts(self, locations, write_file):
        write_file(locations.system_root / "Logs", 1)
        report = ReclaimEngine(locations).run()

        assert len(report.failures) == 1
        assert report.failures[0].target.path == locations.system_root / "Logs" / "CBS"
        assert report.recreate_failures == 1
        assert report.clear_failures == 0
