"""Tests for the animated, cancellable layout."""

import asyncio
import math
import random

import pytest

from forcegraph.core import DegenerateLayoutError, Graph, LayoutBusyError, generate_random_network
from forcegraph.layout import CancellationToken, FruchtermanReingold, LayoutParams, fruchterman_reingold_animate
from forcegraph.render import CollectingRenderer

FAST = LayoutParams(attraction_constant=1.0, repulsion_constant=1.0, frame_delay=0)


@pytest.fixture
def graph():
    return generate_random_network(Graph(width=500, height=400, rng=random.Random(11)), 15, 0.2)


def within_animated_bounds(graph):
    w, h = graph.width, graph.height
    return all(
        math.isfinite(n.x) and math.isfinite(n.y) and 20 <= n.x <= w - 20 and 20 <= n.y <= h - 20
        for n in graph.nodes
    )


def test_runs_all_passes_and_emits_each(graph):
    renderer = CollectingRenderer()
    passes = asyncio.run(FruchtermanReingold(graph, FAST).animate(renderer))

    assert passes == 80
    assert len(renderer) == 80
    assert renderer.last == graph.snapshot()
    assert within_animated_bounds(graph)
    assert graph.animating is False


def test_frames_show_progress(graph):
    renderer = CollectingRenderer()
    asyncio.run(FruchtermanReingold(graph, FAST).animate(renderer))
    assert renderer.frames[0] != renderer.frames[-1]


def test_cancel_from_callback_stops_before_next_pass(graph):
    token = CancellationToken()
    frames = []

    def on_step(snapshot):
        frames.append(snapshot)
        if len(frames) == 3:
            token.cancel()

    passes = asyncio.run(FruchtermanReingold(graph, FAST).animate(on_step, token))

    assert passes == 3
    assert len(frames) == 3
    # positions are those of the last completed pass
    assert graph.snapshot() == frames[-1]
    assert within_animated_bounds(graph)


def test_cancel_from_another_task(graph):
    params = LayoutParams(frame_delay=0.001)
    token = CancellationToken()
    frames = []
    started = None

    def on_step(snapshot):
        frames.append(snapshot)
        if len(frames) == 2:
            started.set()

    async def scenario():
        nonlocal started
        started = asyncio.Event()
        task = asyncio.create_task(FruchtermanReingold(graph, params).animate(on_step, token))
        await started.wait()
        token.cancel()
        return await task

    passes = asyncio.run(scenario())

    assert 2 <= passes <= 3
    assert len(frames) == passes
    assert within_animated_bounds(graph)
    assert graph.animating is False


def test_stop_method_cancels(graph):
    engine = FruchtermanReingold(graph, FAST)

    def on_step(snapshot):
        engine.stop()

    assert asyncio.run(engine.animate(on_step)) == 1


def test_pre_cancelled_token_runs_nothing(graph):
    before = graph.snapshot()
    token = CancellationToken()
    token.cancel()
    renderer = CollectingRenderer()

    passes = asyncio.run(FruchtermanReingold(graph, FAST).animate(renderer, token))

    assert passes == 0
    assert len(renderer) == 0
    assert graph.snapshot() == before


def test_async_callback_is_awaited(graph):
    seen = []

    async def on_step(snapshot):
        await asyncio.sleep(0)
        seen.append(len(snapshot.nodes))

    passes = asyncio.run(fruchterman_reingold_animate(graph, 1.0, 1.0, on_step, iterations=5, frame_delay=0))
    assert passes == 5
    assert seen == [15] * 5


def test_second_animation_on_same_graph_is_refused(graph):
    params = LayoutParams(frame_delay=0.001)

    async def scenario():
        first = FruchtermanReingold(graph, params)
        task = asyncio.create_task(first.animate())
        await asyncio.sleep(0.005)
        assert graph.animating is True

        with pytest.raises(LayoutBusyError):
            await FruchtermanReingold(graph, params).animate()
        with pytest.raises(LayoutBusyError):
            FruchtermanReingold(graph, params).solve()

        first.stop()
        return await task

    passes = asyncio.run(scenario())
    assert 0 < passes < 80
    assert graph.animating is False


def test_degenerate_animation_leaves_graph_idle():
    g = Graph(width=30, height=300)
    g.add_node("a", 15, 150)
    with pytest.raises(DegenerateLayoutError):
        asyncio.run(FruchtermanReingold(g, FAST).animate())
    assert g.animating is False


def test_animating_flag_cleared_after_callback_error(graph):
    def on_step(snapshot):
        raise RuntimeError("renderer failed")

    with pytest.raises(RuntimeError):
        asyncio.run(FruchtermanReingold(graph, FAST).animate(on_step))
    assert graph.animating is False


def test_graph_cannot_change_between_passes(graph):
    ids = [n.id for n in graph.nodes]
    frames = []

    def on_step(snapshot):
        frames.append(snapshot)
        graph.delete_all_nodes()

    with pytest.raises(LayoutBusyError):
        asyncio.run(FruchtermanReingold(graph, FAST).animate(on_step))

    assert len(frames) == 1
    assert [n.id for n in graph.nodes] == ids
    assert graph.animating is False
    graph.add_node("late")
