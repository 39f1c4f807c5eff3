import unittest
import contextlib
import io
import os
import tempfile
from withdrawal import cli

SCENARIO_CSV = (
    "Date,Open,High,Low,Close\n"
    "2000-01-01,90,100,80,95\n"
    "2001-01-01,190,200,180,195\n"
    "2010-01-01,990,1000,980,995\n"
)

FLAT_ARGS = ["-c", "100", "-r", "1", "-y", "1", "-i", "1.0", "-l", "0"]


class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "GSPC.csv")
        with open(self.path, "w") as f:
            f.write(SCENARIO_CSV)

    def tearDown(self):
        self.tmpdir.cleanup()

    def run_cli(self, *args):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = cli.main(list(args))
        return code, out.getvalue()

    def test_should_print_summary(self):
        code, output = self.run_cli("-f", self.path, *FLAT_ARGS)

        self.assertEqual(code, 0)
        self.assertIn("success 1, failed: 1, N/A: 1, successful rate 0.500000", output)

    def test_should_print_trace_given_verbose(self):
        code, output = self.run_cli("-v", "-f", self.path, *FLAT_ARGS)

        self.assertEqual(code, 0)
        self.assertIn("initial: capital 100, it can buy 1 shares", output)
        self.assertIn("not satisfied", output)
        self.assertIn("no more available date to test", output)

    def test_should_report_na_rate_given_no_decided_outcome(self):
        code, output = self.run_cli("-f", self.path, "-y", "50")

        self.assertEqual(code, 0)
        self.assertIn("success 0, failed: 0, N/A: 3, successful rate N/A", output)

    def test_should_fail_given_missing_file(self):
        code, output = self.run_cli("-f", os.path.join(self.tmpdir.name, "missing.csv"))

        self.assertEqual(code, 1)
        self.assertNotIn("success", output)

    def test_should_fail_given_empty_price_history(self):
        with open(self.path, "w") as f:
            f.write("Date,Open,High,Low,Close\n")

        code, _ = self.run_cli("-f", self.path)

        self.assertEqual(code, 1)

    def test_should_fail_given_invalid_parameters(self):
        code, _ = self.run_cli("-f", self.path, "-r", "0")
        self.assertEqual(code, 1)

    def test_should_fail_given_row_without_date(self):
        with open(self.path, "w") as f:
            f.write("Date,Open,High\n2000-01-01,1,100\n,1,150\n2001-01-01,1,200\n")

        code, output = self.run_cli("-f", self.path, *FLAT_ARGS)

        self.assertEqual(code, 1)
        self.assertNotIn("success", output)


if __name__ == '__main__':
    unittest.main()
