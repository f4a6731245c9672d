"""Command-line entrypoint for Orchestra.

Runs the radio hub, or plays the demo line as a conductor or listener actor.
"""

import argparse
import logging
import sys
import threading
from typing import Optional, Sequence

import uvicorn

from notation.markings import Dynamic, KeySignature, NoteDuration
from orchestra.config import get_config
from orchestra.di_container import DIContainer
from orchestra.exceptions import OrchestraError
from orchestra.logging_config import setup_logging
from orchestra.playback import PlaybackController
from orchestra.radio_hub import create_app
from orchestra.sync_channel import SyncChannel

logger = logging.getLogger(__name__)

# A simulated listener has a private medium and can never be started
SIMULATED_LISTEN_TIMEOUT = 10.0

# (pitch in Hz or None for a rest, duration)
DEMO_LINE = [
    (330, NoteDuration.QUARTER),
    (330, NoteDuration.QUARTER),
    (349, NoteDuration.QUARTER),
    (392, NoteDuration.QUARTER),
    (392, NoteDuration.QUARTER),
    (349, NoteDuration.QUARTER),
    (330, NoteDuration.QUARTER),
    (294, NoteDuration.QUARTER),
    (262, NoteDuration.QUARTER),
    (262, NoteDuration.QUARTER),
    (294, NoteDuration.QUARTER),
    (330, NoteDuration.QUARTER),
    (330, NoteDuration.QUARTER),
    (294, NoteDuration.EIGHTH),
    (None, NoteDuration.EIGHTH),
    (294, NoteDuration.HALF),
]


def play_line(playback: PlaybackController, line: Sequence) -> None:
    """Play a line note by note, mirroring pitch and progress on the grid."""
    total = len(line)
    for index, (pitch, duration) in enumerate(line, start=1):
        if pitch is None:
            playback.rest(duration)
        else:
            playback.plot_pitch(pitch)
            playback.play_note(pitch, duration)
        playback.show_progress(index, total)


def run_conductor(playback: PlaybackController, sync: SyncChannel, signal: int) -> None:
    """Broadcast the start signal, then play."""
    sync.send_start_signal(signal)
    play_line(playback, DEMO_LINE)


def run_listener(
    playback: PlaybackController,
    sync: SyncChannel,
    signal: int,
    timeout: Optional[float] = None,
) -> bool:
    """Wait for the start signal, then play.

    The handler only sets an event; playback stays on the calling thread.

    Returns:
        True if the line was played, False if the wait timed out
    """
    started = threading.Event()
    sync.on_signal_received(signal, started.set)

    logger.info(f"Waiting for start signal {signal}")
    if not started.wait(timeout):
        logger.warning(f"No start signal {signal} within {timeout}s")
        return False

    play_line(playback, DEMO_LINE)
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orchestra", description="Synchronized melodic actors"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    hub = sub.add_parser("hub", help="Serve the radio hub")
    hub.add_argument("--host", help="Bind address (default: ORCHESTRA_HUB_HOST)")
    hub.add_argument("--port", type=int, help="Port (default: ORCHESTRA_HUB_PORT)")

    play = sub.add_parser("play", help="Play the demo line")
    play.add_argument("--role", choices=["conductor", "listener"], default="conductor")
    play.add_argument("--signal", type=int, default=1, help="Start signal value")
    play.add_argument("--tempo", type=int, help="Tempo in BPM (default: ORCHESTRA_TEMPO)")
    play.add_argument(
        "--dynamic", choices=["pp", "p", "mf", "f", "ff"], help="Dynamic marking"
    )
    play.add_argument("--key", choices=[k.name for k in KeySignature], help="Key signature")
    play.add_argument(
        "--timeout",
        type=float,
        help="Listener wait limit in seconds (simulated backend default: 10; live: wait forever)",
    )
    play.add_argument("--name", default=None, help="Actor name for logs")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
    except OrchestraError as e:
        print(e, file=sys.stderr)
        return 2

    setup_logging()

    if args.command == "hub":
        uvicorn.run(
            create_app(),
            host=args.host or config.hub_host,
            port=args.port or config.hub_port,
            log_config=None,
        )
        return 0

    container = DIContainer(config, actor=args.name or args.role)
    try:
        playback = container.get_playback()
        sync = container.get_sync_channel()

        if args.tempo is not None:
            playback.set_tempo(args.tempo)
        if args.dynamic is not None:
            playback.set_dynamic(Dynamic.from_marking(args.dynamic))
        if args.key is not None:
            playback.set_key_signature(KeySignature[args.key])
        playback.sync_brightness()

        logger.info(f"Actor ready: {playback.snapshot()}")

        if args.role == "conductor":
            run_conductor(playback, sync, args.signal)
        else:
            timeout = args.timeout
            if timeout is None and config.backend == "simulated":
                timeout = SIMULATED_LISTEN_TIMEOUT
            if not run_listener(playback, sync, args.signal, timeout):
                return 1

        logger.info(f"Performance finished: {playback.snapshot()}")
        return 0

    except OrchestraError as e:
        logger.error(f"Actor failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    finally:
        container.cleanup()


if __name__ == "__main__":
    sys.exit(main())
