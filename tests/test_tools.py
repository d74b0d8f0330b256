"""
Tests for MCP tools.

Tests the MCP tool implementations for classification, controllers,
validation, and device reports.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_gm1.controllers import InMemoryChannelState
from chuk_mcp_gm1.models import VelocityConfig
from chuk_mcp_gm1.reports import ReportLoader


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


class TestClassificationTools:
    """Tests for classification tools."""

    @pytest.mark.asyncio
    async def test_classify_program(self) -> None:
        """Classify a strings program."""
        from chuk_mcp_gm1.tools.classification import register_classification_tools

        mcp = MockMCPServer("test")
        tools = register_classification_tools(mcp)

        data = json.loads(await tools["gm1_classify_program"](program=41))
        assert data["status"] == "success"
        assert data["category"] == "strings"
        assert data["name"] == "Strings"
        assert data["program_range"] == [41, 48]
        assert data["modulation"] == {"vibrato": 1.0, "brightness": None, "lfo": None}

    @pytest.mark.asyncio
    async def test_classify_invalid_program(self) -> None:
        """Invalid programs are Unknown, not an error."""
        from chuk_mcp_gm1.tools.classification import register_classification_tools

        mcp = MockMCPServer("test")
        tools = register_classification_tools(mcp)

        data = json.loads(await tools["gm1_classify_program"](program=200))
        assert data["status"] == "success"
        assert data["category"] == "unknown"
        assert data["program_range"] is None
        assert data["modulation"]["vibrato"] == 0.5

    @pytest.mark.asyncio
    async def test_list_categories(self) -> None:
        """All 16 melodic categories are listed."""
        from chuk_mcp_gm1.tools.classification import register_classification_tools

        mcp = MockMCPServer("test")
        tools = register_classification_tools(mcp)

        data = json.loads(await tools["gm1_list_categories"]())
        assert data["status"] == "success"
        assert data["count"] == 16
        assert data["categories"][0]["name"] == "Piano"
        assert data["categories"][-1]["program_range"] == [121, 128]

    def test_tools_registered_on_server(self) -> None:
        """Tools are registered with the server under their names."""
        from chuk_mcp_gm1.tools.classification import register_classification_tools

        mcp = MockMCPServer("test")
        register_classification_tools(mcp)
        assert set(mcp.tools) == {"gm1_classify_program", "gm1_list_categories"}


class TestControllerTools:
    """Tests for controller tools."""

    @pytest.mark.asyncio
    async def test_modulation_wheel_brass(self) -> None:
        """Brass on channel 0: vibrato and brightness."""
        from chuk_mcp_gm1.tools.controllers import register_controller_tools

        mcp = MockMCPServer("test")
        tools = register_controller_tools(mcp, InMemoryChannelState())

        await tools["gm1_set_channel_program"](channel=0, program=57)
        data = json.loads(await tools["gm1_modulation_wheel"](channel=0, value=127))
        assert data["status"] == "success"
        state = data["state"]
        assert state["category"] == "Brass"
        assert state["vibrato_depth"] == pytest.approx(1.0)
        assert state["brightness"] == pytest.approx(0.5)
        assert state["lfo_depth"] == 0.0

    @pytest.mark.asyncio
    async def test_volume_controller(self) -> None:
        """CC#7 reports dB and stores linear gain."""
        from chuk_mcp_gm1.tools.controllers import register_controller_tools

        mcp = MockMCPServer("test")
        tools = register_controller_tools(mcp, InMemoryChannelState())

        data = json.loads(await tools["gm1_volume_controller"](channel=3, value=0))
        assert data["status"] == "success"
        assert data["volume_db"] == -60.0
        assert data["state"]["volume"] == pytest.approx(0.001)

    @pytest.mark.asyncio
    async def test_get_channel_state(self) -> None:
        """Fresh channels start on program 1."""
        from chuk_mcp_gm1.tools.controllers import register_controller_tools

        mcp = MockMCPServer("test")
        tools = register_controller_tools(mcp, InMemoryChannelState())

        data = json.loads(await tools["gm1_get_channel_state"](channel=15))
        assert data["status"] == "success"
        assert data["state"]["channel"] == 15
        assert data["state"]["program"] == 1
        assert data["state"]["category"] == "Piano"

    @pytest.mark.asyncio
    async def test_percussion_channel(self) -> None:
        """Channel 10 reports percussion and ignores the wheel."""
        from chuk_mcp_gm1.tools.controllers import register_controller_tools

        mcp = MockMCPServer("test")
        tools = register_controller_tools(mcp, InMemoryChannelState())

        data = json.loads(await tools["gm1_modulation_wheel"](channel=9, value=127))
        assert data["status"] == "success"
        assert data["state"]["category"] == "Percussion (Channel 10)"
        assert data["state"]["vibrato_depth"] == 0.0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "tool_name,kwargs",
        [
            ("gm1_set_channel_program", {"channel": 16, "program": 1}),
            ("gm1_modulation_wheel", {"channel": 16, "value": 64}),
            ("gm1_volume_controller", {"channel": -1, "value": 64}),
            ("gm1_get_channel_state", {"channel": 99}),
        ],
    )
    async def test_invalid_channel(self, tool_name: str, kwargs: dict) -> None:
        """Invalid channels are reported as errors."""
        from chuk_mcp_gm1.tools.controllers import register_controller_tools

        mcp = MockMCPServer("test")
        tools = register_controller_tools(mcp, InMemoryChannelState())

        data = json.loads(await tools[tool_name](**kwargs))
        assert data["status"] == "error"
        assert "Invalid channel" in data["message"]


class TestValidationTools:
    """Tests for validation tools."""

    @pytest.mark.asyncio
    async def test_validate_program_quality(self) -> None:
        """Passing and failing metrics."""
        from chuk_mcp_gm1.tools.validation import register_validation_tools

        mcp = MockMCPServer("test")
        tools = register_validation_tools(mcp)

        good = json.loads(
            await tools["gm1_validate_program_quality"](program=1, recognition_score=0.9)
        )
        assert good["status"] == "success"
        assert good["passed"] is True

        bad = json.loads(
            await tools["gm1_validate_program_quality"](
                program=1, recognition_score=0.9, frequency_accuracy=15.0
            )
        )
        assert bad["passed"] is False

    @pytest.mark.asyncio
    async def test_validate_audio_quality(self) -> None:
        """Audio check returns both tiers and issues."""
        from chuk_mcp_gm1.tools.validation import register_validation_tools

        mcp = MockMCPServer("test")
        tools = register_validation_tools(mcp)

        data = json.loads(
            await tools["gm1_validate_audio_quality"](
                sample_rate_hz=11025,
                bit_depth=16,
                dynamic_range_db=96.0,
                polyphony_voices=64,
            )
        )
        assert data["status"] == "success"
        assert data["meets_minimum"] is False
        assert data["issues"] == ["Sample rate 11025 Hz below minimum 22050 Hz."]

    @pytest.mark.asyncio
    async def test_configure_program_velocity(self) -> None:
        """Accepted configs reach the configurator."""
        from chuk_mcp_gm1.tools.validation import register_validation_tools

        applied: list[tuple[int, VelocityConfig]] = []

        class Configurator:
            def apply_velocity_config(self, program: int, config: VelocityConfig) -> None:
                applied.append((program, config))

        mcp = MockMCPServer("test")
        tools = register_validation_tools(mcp, Configurator())

        ok = json.loads(
            await tools["gm1_configure_program_velocity"](program=1, velocity_layers=4)
        )
        rejected = json.loads(
            await tools["gm1_configure_program_velocity"](program=2, velocity_layers=1)
        )
        assert ok["accepted"] is True
        assert rejected["accepted"] is False
        assert [program for program, _ in applied] == [1]

    @pytest.mark.asyncio
    async def test_program_switch_latency(self) -> None:
        """Latency estimate with compliance verdict."""
        from chuk_mcp_gm1.tools.validation import register_validation_tools

        mcp = MockMCPServer("test")
        tools = register_validation_tools(mcp)

        data = json.loads(
            await tools["gm1_program_switch_latency"](from_program=57, to_program=41)
        )
        assert data["status"] == "success"
        assert data["latency_ms"] == 45
        assert data["limit_ms"] == 100
        assert data["compliant"] is True

    @pytest.mark.asyncio
    async def test_program_switch_latency_invalid(self) -> None:
        """Invalid programs are an error."""
        from chuk_mcp_gm1.tools.validation import register_validation_tools

        mcp = MockMCPServer("test")
        tools = register_validation_tools(mcp)

        data = json.loads(
            await tools["gm1_program_switch_latency"](from_program=0, to_program=41)
        )
        assert data["status"] == "error"
        assert "Invalid program" in data["message"]

    @pytest.mark.asyncio
    async def test_consistency_score(self) -> None:
        """Two similar devices are consistent."""
        from chuk_mcp_gm1.tools.validation import register_validation_tools

        mcp = MockMCPServer("test")
        tools = register_validation_tools(mcp)

        data = json.loads(
            await tools["gm1_consistency_score"](
                device1={"program": 1, "recognition_score": 0.9, "frequency_accuracy": 2.0},
                device2={"program": 1, "recognition_score": 0.85, "frequency_accuracy": 5.0},
            )
        )
        assert data["status"] == "success"
        assert data["score"] == pytest.approx(0.95)
        assert data["consistent"] is True

    @pytest.mark.asyncio
    async def test_consistency_score_bad_metrics(self) -> None:
        """Malformed metrics are an error."""
        from chuk_mcp_gm1.tools.validation import register_validation_tools

        mcp = MockMCPServer("test")
        tools = register_validation_tools(mcp)

        data = json.loads(
            await tools["gm1_consistency_score"](
                device1={"program": 1},
                device2={"program": 1, "recognition_score": 0.85},
            )
        )
        assert data["status"] == "error"


class TestReportTools:
    """Tests for report tools."""

    @pytest.fixture
    def loader(self, library_path: Path, temp_dir: Path) -> ReportLoader:
        return ReportLoader(library_path=library_path, project_path=temp_dir)

    @pytest.mark.asyncio
    async def test_list_reports(self, loader: ReportLoader) -> None:
        """Library reports are listed."""
        from chuk_mcp_gm1.tools.reports import register_report_tools

        mcp = MockMCPServer("test")
        tools = register_report_tools(mcp, loader)

        data = json.loads(await tools["gm1_list_reports"]())
        assert data["status"] == "success"
        names = {r["name"] for r in data["reports"]}
        assert {"reference-synth", "budget-synth"} <= names

    @pytest.mark.asyncio
    async def test_evaluate_report(self, loader: ReportLoader) -> None:
        """Evaluate the budget device."""
        from chuk_mcp_gm1.tools.reports import register_report_tools

        mcp = MockMCPServer("test")
        tools = register_report_tools(mcp, loader)

        data = json.loads(await tools["gm1_evaluate_report"](name="budget-synth"))
        assert data["status"] == "success"
        evaluation = data["evaluation"]
        assert evaluation["compliant"] is False
        assert evaluation["audio"]["meets_minimum"] is True
        assert evaluation["failed_programs"] == [41, 57]

    @pytest.mark.asyncio
    async def test_compare_reports(self, loader: ReportLoader) -> None:
        """Compare the two library devices."""
        from chuk_mcp_gm1.tools.reports import register_report_tools

        mcp = MockMCPServer("test")
        tools = register_report_tools(mcp, loader)

        data = json.loads(
            await tools["gm1_compare_reports"](first="reference-synth", second="budget-synth")
        )
        assert data["status"] == "success"
        assert [p["program"] for p in data["programs"]] == [1, 41, 57]
        assert data["consistent_programs"] == 2
        assert data["dynamic_range_consistent"] is False

    @pytest.mark.asyncio
    async def test_unknown_report(self, loader: ReportLoader) -> None:
        """Unknown report names are an error."""
        from chuk_mcp_gm1.tools.reports import register_report_tools

        mcp = MockMCPServer("test")
        tools = register_report_tools(mcp, loader)

        data = json.loads(await tools["gm1_evaluate_report"](name="nonexistent"))
        assert data["status"] == "error"
        assert data["message"] == "Report not found: nonexistent"

        data = json.loads(
            await tools["gm1_compare_reports"](first="reference-synth", second="nonexistent")
        )
        assert data["status"] == "error"
