"""Tests for the interactive conversion prompt."""

import io

from conversion_wiz.prompt import ConversionPrompt, run_prompt


def _run(graph, *lines):
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    ConversionPrompt(graph, stdin=stdin, stdout=stdout).run()
    return stdout.getvalue()


class TestConversionPrompt:
    """Tests for ConversionPrompt rounds."""

    def test_successful_conversion(self, temperature_graph):
        output = _run(temperature_graph, "C", "K", "15", "exit")

        assert "15 C = 288.15 K" in output

    def test_multi_hop_conversion(self, chain_graph):
        output = _run(chain_graph, "a", "c", "1", "exit")

        assert "1 a = 5 c" in output

    def test_list_command(self, graph):
        graph.register_unit("Celsius", ["C"])
        graph.register_unit("hidden", intermediate=True)

        output = _run(graph, "LIST", "exit")

        assert "Units:" in output
        assert "\t1: Celsius (C)" in output
        assert "hidden" not in output

    def test_invalid_first_unit(self, temperature_graph):
        output = _run(temperature_graph, "Q", "exit")

        assert "Please enter a valid unit." in output
        assert "Enter second unit" not in output

    def test_invalid_second_unit(self, temperature_graph):
        output = _run(temperature_graph, "C", "Q", "exit")

        assert "Please enter a valid unit." in output
        assert "Enter value to convert:" not in output

    def test_invalid_number(self, temperature_graph):
        output = _run(temperature_graph, "C", "K", "warm", "exit")

        assert "Please enter a valid number." in output

    def test_conversion_error_is_reported_and_loop_continues(self, temperature_graph):
        temperature_graph.register_unit("Meter", ["m"])

        output = _run(temperature_graph, "C", "m", "1", "K", "C", "273.15", "exit")

        assert "Error: No conversion path found from 'C' to 'm'" in output
        assert "273.15 K = 0 C" in output

    def test_exit_at_any_step(self, temperature_graph):
        assert "Enter second unit" not in _run(temperature_graph, "Exit")
        assert "Enter value" not in _run(temperature_graph, "C", "EXIT")
        assert "=" not in _run(temperature_graph, "C", "K", "exit")

    def test_end_of_input_stops_loop(self, temperature_graph):
        output = _run(temperature_graph, "C", "K")

        assert output.count("Enter first unit") == 1

    def test_run_prompt_helper(self, temperature_graph):
        stdout = io.StringIO()

        run_prompt(temperature_graph, stdin=io.StringIO("K\nR\n100\n"), stdout=stdout)

        assert "100 K = 180 R" in stdout.getvalue()

    def test_run_prompt_defaults_to_process_stdin(self, temperature_graph, monkeypatch):
        stdout = io.StringIO()
        monkeypatch.setattr("sys.stdin", io.StringIO("C\nK\n0\n"))

        run_prompt(temperature_graph, stdout=stdout)

        assert "0 C = 273.15 K" in stdout.getvalue()
