import tempfile
import unittest
from pathlib import Path

from advent.core.execute import FileInputResolver, InputResolutionError, execute, execute_all
from advent.core.models import Identity
from advent.core.registry import Registry

from helpers import CallCounter, digit_sum


def _write_inputs(base: Path, files: dict[str, str]) -> None:
    for rel, text in files.items():
        path = base / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")


class FileInputResolverTests(unittest.TestCase):
    def test_default_pattern_pads_day(self):
        resolver = FileInputResolver("/data/inputs")
        self.assertEqual(resolver.path_for(Identity(2015, 1, 2)), Path("/data/inputs/2015/01.txt"))
        self.assertEqual(resolver.path_for(Identity(2023, 11, 1)), Path("/data/inputs/2023/11.txt"))

    def test_custom_pattern(self):
        resolver = FileInputResolver("/data", "{year}-day{day}-part{part}.in")
        self.assertEqual(resolver.path_for(Identity(2023, 4, 2)), Path("/data/2023-day4-part2.in"))

    def test_reads_text(self):
        with tempfile.TemporaryDirectory() as tmp:
            _write_inputs(Path(tmp), {"2015/03.txt": "^>v<"})
            self.assertEqual(FileInputResolver(tmp)(Identity(2015, 3, 1)), "^>v<")

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(InputResolutionError) as ctx:
                FileInputResolver(tmp)(Identity(2015, 3, 1))
        self.assertEqual(ctx.exception.identity, Identity(2015, 3, 1))
        self.assertIn("2015 :: Day 03 :: Part 1", str(ctx.exception))
        self.assertIsInstance(ctx.exception, OSError)

    def test_undecodable_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "2015" / "02.txt"
            path.parent.mkdir(parents=True)
            path.write_bytes(b"\xff\xfe2x3x4")
            with self.assertRaises(InputResolutionError) as ctx:
                FileInputResolver(tmp)(Identity(2015, 2, 1))
        self.assertEqual(ctx.exception.identity, Identity(2015, 2, 1))
        self.assertIn("can't decode", str(ctx.exception))


class ExecuteTests(unittest.TestCase):
    def test_value_and_timing(self):
        registry = Registry()
        registry.add(1, 1, 1, digit_sum)
        outcome = execute(registry.collect_all()[0], lambda identity: "999")
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.value, 27)
        self.assertIsNone(outcome.error)
        self.assertGreaterEqual(outcome.elapsed, 0.0)

    def test_unit_fault_is_captured(self):
        registry = Registry()
        registry.add(1, 1, 1, digit_sum)
        outcome = execute(registry.collect_all()[0], lambda identity: "12a")
        self.assertFalse(outcome.ok)
        self.assertIsNone(outcome.value)
        self.assertEqual(outcome.error, "not a digit: a")
        self.assertIsNotNone(outcome.elapsed)

    def test_disabled_record_is_not_resolved_or_run(self):
        counter = CallCounter()
        resolved = []

        def resolve(identity):
            resolved.append(identity)
            return "x"

        registry = Registry()
        registry.add(1, 1, 1, counter, disabled=True)
        outcome = execute(registry.collect_all()[0], resolve)
        self.assertTrue(outcome.skipped)
        self.assertIsNone(outcome.elapsed)
        self.assertFalse(outcome.ok)
        self.assertEqual(counter.calls, [])
        self.assertEqual(resolved, [])

    def test_resolution_failure_propagates(self):
        def resolve(identity):
            raise InputResolutionError(identity, Path("missing.txt"), "No such file or directory")

        registry = Registry()
        registry.add(1, 1, 1, digit_sum)
        with self.assertRaises(InputResolutionError):
            execute(registry.collect_all()[0], resolve)


class ExecuteAllTests(unittest.TestCase):
    def _records(self):
        registry = Registry()
        for day in (4, 2, 3, 1):
            registry.add(2015, day, 1, digit_sum)
        registry.add(2015, 5, 1, digit_sum, disabled=True)
        return registry.collect_all()

    def test_repeated_sweeps_are_identical(self):
        inputs = {
            "2015/01.txt": "111",
            "2015/02.txt": "22x",
            "2015/03.txt": "3",
            "2015/04.txt": "4444",
        }
        with tempfile.TemporaryDirectory() as tmp:
            _write_inputs(Path(tmp), inputs)
            resolver = FileInputResolver(tmp)
            first = execute_all(self._records(), resolver, workers=4)
            second = execute_all(self._records(), resolver, workers=2)

        def strip(outcomes):
            return [(o.identity, o.value, o.error, o.skipped) for o in outcomes]

        self.assertEqual(strip(first), strip(second))
        self.assertEqual([o.identity.day for o in first], [1, 2, 3, 4, 5])
        self.assertEqual([o.value for o in first], [3, None, 3, 16, None])
        self.assertEqual(first[1].error, "not a digit: x")
        self.assertTrue(first[4].skipped)

    def test_excluding_skipped(self):
        with tempfile.TemporaryDirectory() as tmp:
            _write_inputs(Path(tmp), {f"2015/0{d}.txt": "1" for d in range(1, 5)})
            outcomes = execute_all(self._records(), FileInputResolver(tmp), include_skipped=False)
        self.assertEqual([o.identity.day for o in outcomes], [1, 2, 3, 4])

    def test_missing_input_aborts_batch(self):
        with tempfile.TemporaryDirectory() as tmp:
            _write_inputs(Path(tmp), {"2015/01.txt": "1", "2015/02.txt": "2", "2015/04.txt": "4"})
            with self.assertRaises(InputResolutionError) as ctx:
                execute_all(self._records(), FileInputResolver(tmp))
        self.assertEqual(ctx.exception.identity, Identity(2015, 3, 1))

    def test_empty_batch(self):
        self.assertEqual(execute_all([], FileInputResolver("/nowhere")), [])


if __name__ == "__main__":
    unittest.main()
