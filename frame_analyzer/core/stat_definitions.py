"""
Built-in aggregate stat and tab definitions.

Display names are indented with non-breaking spaces so the summary readout
shows the game thread breakdown as a tree.
"""

from typing import Tuple

from .types import AggregateStatDefinition, TabConfig

_LEVEL_1 = '\xa0' * 4
_LEVEL_2 = '\xa0' * 8

DEFAULT_AGGREGATE_STATS: Tuple[AggregateStatDefinition, ...] = (
    AggregateStatDefinition(
        "Frame Time",
        add_labels=("GameThread/FEngineLoopTick",),
    ),
    AggregateStatDefinition(
        _LEVEL_1 + "Net Tick Time",
        add_labels=("GameThread/NetTickTime",),
    ),
    AggregateStatDefinition(
        _LEVEL_2 + "Spawning",
        add_labels=("GameThread/ActorSpawning",),
    ),
    AggregateStatDefinition(
        _LEVEL_2 + "Net Tick Time Misc",
        add_labels=("GameThread/NetTickTime",),
        subtract_labels=("GameThread/ActorSpawning",),
    ),
    AggregateStatDefinition(
        _LEVEL_1 + "Async Loading",
        add_labels=("GameThread/ProcessAsyncLoading",),
    ),
    AggregateStatDefinition(
        _LEVEL_1 + "Game Tick Time",
        add_labels=("GameThread/GameEngineTick",),
    ),
    AggregateStatDefinition(
        _LEVEL_2 + "Hero Characters",
        add_labels=("LokiHeroCharacter/GameThread/ALokiHeroCharacterTick",),
    ),
    AggregateStatDefinition(
        _LEVEL_2 + "VisionGranters",
        add_labels=("VisionGranter/GameThread/Tick",),
    ),
    AggregateStatDefinition(
        _LEVEL_2 + "Projectiles",
        add_labels=("LokiProjectile/GameThread/MovementComponentTick",),
    ),
    AggregateStatDefinition(
        _LEVEL_2 + "VFX",
        add_labels=("Exclusive/GameThread/Effects",),
    ),
    AggregateStatDefinition(
        _LEVEL_2 + "Skeletal Mesh",
        add_labels=("Exclusive/GameThread/Animation",),
    ),
    AggregateStatDefinition(
        _LEVEL_2 + "Character Movement",
        add_labels=("CharacterMovement/GameThread/Tick",),
    ),
    AggregateStatDefinition(
        _LEVEL_2 + "Game Tick Time Misc",
        add_labels=("GameThread/GameEngineTick",),
        subtract_labels=(
            "LokiHeroCharacter/GameThread/ALokiHeroCharacterTick",
            "VisionGranter/GameThread/Tick",
            "LokiProjectile/GameThread/MovementComponentTick",
            "Exclusive/GameThread/Effects",
            "Exclusive/GameThread/Animation",
            "CharacterMovement/GameThread/Tick",
        ),
    ),
    AggregateStatDefinition(
        _LEVEL_1 + "Garbage Collection",
        add_labels=("GameThread/ConditionalCollectGarbage",),
    ),
    AggregateStatDefinition(
        _LEVEL_1 + "Redraw Viewports",
        add_labels=("GameThread/RedrawViewports",),
    ),
    AggregateStatDefinition(
        _LEVEL_2 + "Level Streaming",
        add_labels=("GameThread/UpdateLevelStreaming",),
    ),
    AggregateStatDefinition(
        _LEVEL_2 + "Redraw Viewports Misc",
        add_labels=("GameThread/RedrawViewports",),
        subtract_labels=("GameThread/UpdateLevelStreaming",),
    ),
    AggregateStatDefinition(
        _LEVEL_1 + "Slate Tick",
        add_labels=("Slate/GameThread/Tick",),
    ),
    AggregateStatDefinition(
        _LEVEL_1 + "Misc",
        add_labels=("GameThread/FEngineLoopTick",),
        subtract_labels=(
            "GameThread/NetTickTime",
            "GameThread/ProcessAsyncLoading",
            "GameThread/GameEngineTick",
            "GameThread/ConditionalCollectGarbage",
            "GameThread/RedrawViewports",
            "Slate/GameThread/Tick",
        ),
    ),
)

DEFAULT_TABS: Tuple[TabConfig, ...] = (
    TabConfig(thread="GameThread/", label="GameThread", digits=3, suffix=" ms"),
    TabConfig(thread="RenderThread/", label="RenderThread", digits=3, suffix=" ms"),
    TabConfig(thread="/.*Worker.*/", label="Physics", digits=3, suffix=" ms"),
    TabConfig(thread="FileIO/", label="FileIO", digits=1, suffix=""),
    TabConfig(thread="ActorCount/", label="ActorCount", digits=0, suffix=""),
    TabConfig(thread="Ticks/", label="Ticks", digits=0, suffix=""),
    TabConfig(thread="DrawCall/", label="DrawCall", digits=0, suffix=""),
    TabConfig(thread="Profiler/", label="Profiling meters", digits=0, suffix=""),
    TabConfig(thread="View/", label="View", digits=1, suffix=""),
)
