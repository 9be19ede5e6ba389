"""
Pytest configuration and shared fixtures for frame analyzer tests.
"""
import pytest

from frame_analyzer.core.types import AggregateStatDefinition


@pytest.fixture
def simple_payload():
    """Two frames, no trailing header row."""
    return "FrameTime,GameThreadTime\n10,6\n20,14\n"


@pytest.fixture
def header_at_end_payload():
    """Capture whose real header was written at the end of the trace."""
    return (
        "FrameTime,GameThreadTime\n"
        "16.6,10.1,3.5\n"
        "33.2,20.0,4.5\n"
        "FrameTime,GameThreadTime,RenderThreadTime\n"
        "[HasHeaderRowAtEnd],1\n"
    )


@pytest.fixture
def profiler_payload():
    """Capture shaped like a real profiler CSV, with physics and FileIO columns."""
    header = ",".join([
        "FrameTime",
        "GameThreadTime",
        "RenderThreadTime",
        "FileIO/PerFrameKB",
        "GameThread/FEngineLoopTick",
        "GameThread/NetTickTime",
        "GameThread/ActorSpawning",
        "ChaosPhysics/Worker0",
        "ChaosPhysics/Worker1",
        "Exclusive/GameThread/Physics",
        "RenderThread/InitViews",
        "DrawCall/Total",
    ])
    rows = [
        "16.0,10.0,8.0,12.5,9.0,2.0,0.5,1.0,2.0,0.5,3.0,1500",
        "18.0,12.0,9.0,0.0,11.0,1.0,1.5,1.5,2.5,1.0,3.5,1600",
        "20.0,14.0,7.5,4.0,13.0,3.0,1.0,0.5,0.5,0.0,2.5,1400",
    ]
    return "\n".join([header] + rows + [header, "[HasHeaderRowAtEnd]"])


@pytest.fixture
def game_thread_stat():
    """Single stat reading the game thread time column."""
    return AggregateStatDefinition("GT", add_labels=["GameThreadTime"], subtract_labels=[])


@pytest.fixture
def net_tick_stats():
    """Parent/child stats where the child is derived by subtraction."""
    return [
        AggregateStatDefinition("Net Tick Time", add_labels=["GameThread/NetTickTime"]),
        AggregateStatDefinition("Spawning", add_labels=["GameThread/ActorSpawning"]),
        AggregateStatDefinition(
            "Net Tick Time Misc",
            add_labels=["GameThread/NetTickTime"],
            subtract_labels=["GameThread/ActorSpawning"],
        ),
    ]


@pytest.fixture
def temp_csv_file(tmp_path):
    """Create a temporary CSV file and return a helper function."""
    def _create_file(content, name="capture.csv"):
        file_path = tmp_path / name
        file_path.write_text(content, encoding="utf-8")
        return str(file_path)

    return _create_file
