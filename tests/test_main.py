import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from debug import Debug
from machine import Machine
from main import main, process_io, process_lines


class ProcessTests(unittest.TestCase):
    def test_lines_are_uppercased_and_state_carries_over(self):
        m = Machine.create(["I", "II", "III"], "B")
        out = list(process_lines(m, ["aaa\n", "aa\n"]))
        self.assertEqual(out, ["BDZ", "GO"])

    def test_non_letters_preserved(self):
        m = Machine.create(["I", "II", "III"], "B")
        out = list(process_lines(m, ["a-a a.a a!\n", "\n"]))
        self.assertEqual(out, ["B-D Z.G O!", ""])

    def test_only_ascii_is_uppercased(self):
        m = Machine.create(["I", "II", "III"], "B")
        out = list(process_lines(m, ["\u00df\n", "stra\u00dfe \ufb01\n"]))
        self.assertEqual(out[0], "\u00df")
        self.assertEqual(len(out[1]), len("stra\u00dfe \ufb01"))
        self.assertEqual(out[1][4], "\u00df")
        self.assertEqual(out[1][-1], "\ufb01")
        # only S T R A E stepped the rotors
        self.assertEqual(m.positions, (0, 0, 5))

    def test_process_io(self):
        m = Machine.create(["I", "II", "III"], "B")
        reader = io.StringIO("AAAAA\nhello\n")
        writer = io.StringIO()
        process_io(m, reader, writer)
        lines = writer.getvalue().split("\n")
        self.assertEqual(lines[0], "BDZGO")
        self.assertEqual(len(lines[1]), 5)
        self.assertEqual(lines[2], "")


class MainTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.src = self.dir / "in.txt"
        self.dst = self.dir / "out.txt"

    def tearDown(self):
        self._tmp.cleanup()
        Debug().disable(*Debug().components)

    def _run(self, *argv):
        main(["--input", str(self.src), "--output", str(self.dst), *argv])
        return self.dst.read_text(encoding="utf-8")

    def test_defaults(self):
        self.src.write_text("AAAAA\n", encoding="utf-8")
        self.assertEqual(self._run(), "BDZGO\n")

    def test_round_trip_with_flags(self):
        flags = ["--rotors", "IV,II,V", "--reflector", "C",
                 "--r1", "5", "--r2", "17", "--r3", "26",
                 "--ring1", "3", "--ring2", "1", "--ring3", "12",
                 "-p", "AQ WS ED"]
        self.src.write_text("Meet me at noon, by the old mill.\n", encoding="utf-8")
        cipher = self._run(*flags)
        self.src.write_text(cipher, encoding="utf-8")
        self.assertEqual(self._run(*flags), "MEET ME AT NOON, BY THE OLD MILL.\n")

    def test_config_file(self):
        cfg = self.dir / "cfg.json"
        cfg.write_text(json.dumps({"rotors": ["I", "II", "III"], "reflector": "B"}), encoding="utf-8")
        self.src.write_text("AAAAA\n", encoding="utf-8")
        self.assertEqual(self._run("--config", str(cfg), "--r1", "9"), "BDZGO\n")

    def test_generate_config_then_use_it(self):
        cfg = self.dir / "daily.json"
        main(["--generate-config", str(cfg), "--seed", "3"])
        self.assertTrue(cfg.exists())
        self.src.write_text("WEATHERREPORT\n", encoding="utf-8")
        cipher = self._run("--config", str(cfg))
        self.src.write_text(cipher, encoding="utf-8")
        self.assertEqual(self._run("--config", str(cfg)), "WEATHERREPORT\n")

    def assertExits(self, *argv):
        self.src.write_text("AAAAA\n", encoding="utf-8")
        with self.assertRaises(SystemExit) as cm:
            self._run(*argv)
        self.assertTrue(str(cm.exception.code).startswith("Error: "), cm.exception.code)
        return str(cm.exception.code)

    def test_configuration_errors_exit(self):
        self.assertIn("rotor", self.assertExits("--rotors", "I,II"))
        self.assertIn("VIII", self.assertExits("--rotors", "I,II,VIII"))
        self.assertIn("reflector", self.assertExits("--reflector", "Z"))
        self.assertExits("--r2", "0")
        self.assertExits("--ring3", "27")
        self.assertExits("-p", "AB BC")
        self.assertExits("-p", "ABC")
        self.assertExits("-p", "A1")
        self.assertExits("--debug", "nonsense")

    def _config(self, data):
        cfg = self.dir / "cfg.json"
        cfg.write_text(json.dumps(data), encoding="utf-8")
        return str(cfg)

    def test_malformed_config_exits(self):
        self.assertExits("--config", self._config([]))
        self.assertExits("--config", self._config({"rotors": ["I", "II", "III"], "reflector": 5}))
        self.assertExits("--config", self._config({"rotors": [1, 2, 3], "reflector": "B"}))
        self.assertExits("--config", self._config({"rotors": "I,II,III", "reflector": "B", "positions": 7}))

    def test_help_mentions_case_insensitive_names(self):
        with contextlib.redirect_stdout(io.StringIO()) as out:
            with self.assertRaises(SystemExit) as cm:
                main(["--help"])
        self.assertEqual(cm.exception.code, 0)
        # argparse may wrap the help text at the hyphen
        self.assertIn("case-insensitive", "".join(out.getvalue().split()))

    def test_log_file(self):
        log = self.dir / "debug.log"
        self.src.write_text("A\n", encoding="utf-8")
        with self.assertLogs("ENIGMA", level="DEBUG"):
            self._run("--debug", "encipher", "--log-file", str(log))
        self.assertIn("[ENCIPHER] A -> B", log.read_text(encoding="utf-8"))

    def test_missing_input_file_exits(self):
        with self.assertRaises(SystemExit) as cm:
            main(["--input", str(self.dir / "nope.txt")])
        self.assertTrue(str(cm.exception.code).startswith("Error: "))

    def test_debug_flag_logs(self):
        self.src.write_text("A\n", encoding="utf-8")
        with self.assertLogs("ENIGMA", level="DEBUG") as logs:
            self._run("--debug", "encipher")
        self.assertTrue(any("A -> B" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()
