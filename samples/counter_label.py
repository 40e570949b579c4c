#!/usr/bin/env python3
"""
Counter label demo

Animates a label from 10 to 20 over 10 seconds, the way a UI would wire a
tween to a widget: every tick becomes a Set(n) message, the model applies it
and the "label" is redrawn.

Run:
    python samples/counter_label.py
    python samples/counter_label.py --preset pulse --seconds 5
"""

import argparse
import asyncio
from dataclasses import dataclass
from datetime import timedelta

from tweenloop import AnimationConfig
from tweenloop.managers.preset_manager import PresetManager
from tweenloop.models.enums import LogCategory, LogLevel
from tweenloop.utils.logger import configure_logger, get_category_logger

log = get_category_logger(LogCategory.GENERAL)


@dataclass
class Set:
    value: object


class Model:
    def __init__(self):
        self.counter = 0

    def update(self, msg: Set):
        self.counter = msg.value
        print(f"\r  label: {self.counter!s:<8}", end="", flush=True)


async def main(preset: str = None, seconds: float = None):
    model = Model()

    if preset:
        presets = PresetManager()
        presets.load()
        config = presets.build(preset, Set)
    else:
        config = (
            AnimationConfig(Set)
            .from_(10)
            .to(20)
            .duration(timedelta(seconds=10))
        )

    handle = config.start(model.update)

    try:
        if seconds:
            await asyncio.wait_for(handle.wait(), timeout=seconds)
        else:
            await handle.wait()
    except asyncio.TimeoutError:
        log.info("Stopped by timeout")
    finally:
        handle.cancel()
        print()

    log.info("Final value", counter=model.counter, done=handle.done)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Tween a counter label")
    parser.add_argument("--preset", help="Preset name from presets.yaml")
    parser.add_argument("--seconds", type=float, help="Stop after this many seconds")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    configure_logger(min_level=LogLevel.DEBUG if args.debug else LogLevel.INFO)
    asyncio.run(main(args.preset, args.seconds))
