"""EffectEpisode - the timed chain of effects triggered by one activation."""
from __future__ import annotations

import logging
import random
from typing import Iterator

from potato_schedule import TaskScheduler

from potato_episode.config import EpisodeConfig
from potato_episode.effects import burst_origins, draw_pitch, shake_offsets
from potato_episode.types import EffectSink, HostResolver, Session, SessionRegistry

logger = logging.getLogger(__name__)


class EffectEpisode:
    """Schedules the immediate burst, the pulse sequence and the termination.

    One instance serves any number of activations. An episode has no state of
    its own: it lives in the tasks still pending on the scheduler and is gone
    once its termination task has run.
    """

    def __init__(
        self,
        scheduler: TaskScheduler,
        sink: EffectSink,
        resolve_host: HostResolver,
        config: EpisodeConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._sink = sink
        self._resolve_host = resolve_host
        self._config = config if config is not None else EpisodeConfig()
        self._rng = rng if rng is not None else random.Random()

    @property
    def config(self) -> EpisodeConfig:
        return self._config

    def activate(self, session: Session) -> bool:
        """Entry point for the activation trigger.

        Returns False, without any side effect, when the host context of
        *session* cannot be resolved.
        """
        registry = self._resolve_host(session)
        if registry is None:
            logger.warning("no host context for %r, episode aborted", session)
            return False

        cfg = self._config
        sink = self._sink
        start = self._scheduler.now()
        logger.info("episode started for %r at tick %d", session, start)

        sink.deliver_message(session, cfg.self_transient, True)
        sink.deliver_message(session, cfg.self_persistent, False)
        for modifier in cfg.self_modifiers:
            sink.apply_modifier(session, modifier)

        consumed = cfg.broadcast_consumed.format(name=sink.display_name(session))
        for other in _others(registry, session):
            sink.deliver_message(other, consumed, False)
            for modifier in cfg.other_modifiers:
                sink.apply_modifier(other, modifier)
            sink.deliver_message(other, cfg.broadcast_crashed, False)

        # Pulses are queued before termination so the last pulse runs first
        # when both share a tick.
        for i in range(cfg.pulse_count):
            self._scheduler.schedule(cfg.pulse_delay + i, lambda: self._pulse(session))
        self._scheduler.schedule(
            cfg.termination_delay, lambda: self._terminate(session, registry)
        )
        return True

    def _pulse(self, session: Session) -> None:
        sink = self._sink
        if not sink.is_live(session):
            logger.debug("skipping pulse for disconnected %r", session)
            return

        cfg = self._config
        position = sink.position(session)

        for burst in cfg.bursts:
            origins = burst_origins(
                self._rng, position, burst.count, cfg.jitter_xz, cfg.jitter_y
            )
            for origin in origins:
                sink.emit_visual_burst(session, burst.category, 1, origin)

        pitch = draw_pitch(self._rng, cfg.pitch_min, cfg.pitch_span)
        for cue in cfg.audio_cues:
            sink.emit_audio_cue(session, cue, pitch, cfg.volume)

        # Absolute overwrite at the current position, not a teleport.
        shake = shake_offsets(
            self._scheduler.now(), cfg.shake_amplitude, cfg.shake_frequency
        )
        base = sink.orientation(session)
        sink.update_orientation(
            session, position, base.yaw + shake.yaw, base.pitch + shake.pitch
        )

    def _terminate(self, session: Session, registry: SessionRegistry) -> None:
        cfg = self._config
        for other in _others(registry, session):
            self._sink.deliver_message(other, cfg.broadcast_recovered, False)
        self._sink.terminate_session(session, cfg.disconnect_reason)
        logger.info(
            "episode ended for %r at tick %d", session, self._scheduler.now()
        )


def _others(registry: SessionRegistry, session: Session) -> Iterator[Session]:
    for other in registry.sessions():
        if other is not session:
            yield other
