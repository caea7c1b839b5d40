from __future__ import annotations

import random
import threading

from randstr import RandomSource, RandomStringGenerator
from randstr.random_source import default_random, draw_in_range


class RecordingSource:
    """Deterministic source that cycles through fixed offsets."""

    def __init__(self, offsets: list[int]) -> None:
        self.offsets = offsets
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.offsets[(len(self.calls) - 1) % len(self.offsets)] % stop


def test_random_instances_satisfy_protocol() -> None:
    assert isinstance(random.Random(), RandomSource)
    assert isinstance(random.SystemRandom(), RandomSource)
    assert isinstance(RecordingSource([0]), RandomSource)


def test_custom_source_draws_offset_from_minimum() -> None:
    source = RecordingSource([0, 1, 25])
    gen = (
        RandomStringGenerator.builder()
        .within_range(ord("a"), ord("z"))
        .using_random(source)
        .build()
    )
    assert gen.generate(3) == "abz"
    assert source.calls == [26, 26, 26]


def test_rejected_candidates_consume_draws() -> None:
    # 0x378 and 0x379 are unassigned in the Greek block; 0x37A is assigned.
    source = RecordingSource([0, 1, 2])
    gen = (
        RandomStringGenerator.builder().within_range(0x378, 0x37A).using_random(source).build()
    )
    assert gen.generate(1) == chr(0x37A)
    assert len(source.calls) == 3


def test_zero_length_consumes_no_randomness() -> None:
    source = RecordingSource([0])
    gen = RandomStringGenerator.builder().using_random(source).build()
    assert gen.generate(0) == ""
    assert source.calls == []


def test_seeded_sources_reproduce_output() -> None:
    def build(seed: int) -> str:
        gen = RandomStringGenerator.builder().using_random(random.Random(seed)).build()
        return gen.generate(50)

    assert build(7) == build(7)
    assert build(7) != build(8)


def test_draw_in_range_bounds() -> None:
    source = random.Random(3)
    draws = {draw_in_range(source, 5, 7) for _ in range(200)}
    assert draws == {5, 6, 7}
    defaults = {draw_in_range(None, 5, 7) for _ in range(200)}
    assert defaults == {5, 6, 7}


def test_default_random_is_per_thread() -> None:
    seen: dict[str, random.Random] = {}

    def grab() -> None:
        seen["worker"] = default_random()

    worker = threading.Thread(target=grab)
    worker.start()
    worker.join()
    assert default_random() is default_random()
    assert seen["worker"] is not default_random()
