import unittest

from core.timer_engine import PhaseTimer, progress_fraction
from domain.models import Cue, Phase, TimerConfig


class _Recorder:
    def __init__(self):
        self.notifications: list[tuple[str, str]] = []
        self.cues: list[Cue] = []

    def notify(self, title: str, message: str) -> None:
        self.notifications.append((title, message))

    def cue(self, cue: Cue) -> None:
        self.cues.append(cue)


def _build(config: TimerConfig = TimerConfig(), recorder=None) -> PhaseTimer:
    recorder = recorder or _Recorder()
    return PhaseTimer(
        config_provider=lambda: config,
        notify=recorder.notify,
        on_cue=recorder.cue,
    )


def _run_to_expiry(timer: PhaseTimer) -> None:
    timer.start()
    for _ in range(timer.remaining_sec):
        timer.tick()
    changed = timer.tick()
    assert changed, "expected a phase transition"


SHORT = TimerConfig(work_sec=3, break_sec=2, long_break_sec=4, long_break_interval=2)


class PhaseTimerInitialStateTests(unittest.TestCase):
    def test_starts_idle_in_work_with_defaults(self) -> None:
        timer = PhaseTimer()
        snap = timer.snapshot()
        self.assertEqual(Phase.WORK, snap.phase)
        self.assertEqual(25 * 60, snap.phase_total_sec)
        self.assertEqual(25 * 60, snap.remaining_sec)
        self.assertFalse(snap.is_running)
        self.assertEqual(0, snap.completed_work_cycles)

    def test_tick_is_ignored_while_not_running(self) -> None:
        timer = _build(SHORT)
        self.assertFalse(timer.tick())
        self.assertEqual(3, timer.remaining_sec)


class PhaseTimerCommandTests(unittest.TestCase):
    def test_start_emits_work_running_once(self) -> None:
        recorder = _Recorder()
        timer = _build(SHORT, recorder)
        timer.start()
        timer.start()
        self.assertTrue(timer.is_running)
        self.assertEqual([Cue.WORK_RUNNING], recorder.cues)

    def test_pause_is_noop_when_not_running(self) -> None:
        recorder = _Recorder()
        timer = _build(SHORT, recorder)
        timer.pause()
        self.assertEqual([], recorder.cues)

    def test_pause_then_start_keeps_remaining(self) -> None:
        recorder = _Recorder()
        timer = _build(TimerConfig(work_sec=10), recorder)
        timer.start()
        timer.tick()
        timer.tick()
        timer.pause()
        paused_remaining = timer.remaining_sec
        self.assertFalse(timer.tick())
        timer.start()

        self.assertEqual(8, paused_remaining)
        self.assertEqual(8, timer.remaining_sec)
        self.assertEqual([Cue.WORK_RUNNING, Cue.PAUSED, Cue.WORK_RUNNING], recorder.cues)

    def test_reset_returns_to_idle_work_and_keeps_count(self) -> None:
        recorder = _Recorder()
        timer = _build(SHORT, recorder)
        _run_to_expiry(timer)
        timer.start()
        timer.tick()

        timer.reset()

        snap = timer.snapshot()
        self.assertEqual(Phase.WORK, snap.phase)
        self.assertFalse(snap.is_running)
        self.assertEqual(3, snap.remaining_sec)
        self.assertEqual(1, snap.completed_work_cycles)
        self.assertEqual(Cue.IDLE, recorder.cues[-1])

    def test_reset_rereads_live_config(self) -> None:
        current = {"config": SHORT}
        timer = PhaseTimer(config_provider=lambda: current["config"])
        current["config"] = TimerConfig(work_sec=42)

        timer.reset()

        self.assertEqual(42, timer.phase_total_sec)
        self.assertEqual(42, timer.remaining_sec)

    def test_start_in_break_emits_break_running(self) -> None:
        recorder = _Recorder()
        timer = _build(SHORT, recorder)
        _run_to_expiry(timer)
        timer.start()
        self.assertEqual(Cue.BREAK_RUNNING, recorder.cues[-1])

    def test_start_in_long_break_emits_break_running(self) -> None:
        recorder = _Recorder()
        timer = _build(SHORT, recorder)
        _run_to_expiry(timer)  # work -> break
        _run_to_expiry(timer)  # break -> work
        _run_to_expiry(timer)  # work -> long break (interval 2)
        self.assertEqual(Phase.LONG_BREAK, timer.phase)
        self.assertEqual(Cue.LONG_BREAK, recorder.cues[-1])

        timer.start()

        self.assertTrue(timer.is_running)
        self.assertEqual(Cue.BREAK_RUNNING, recorder.cues[-1])


class PhaseTimerTransitionTests(unittest.TestCase):
    def test_tick_reaches_zero_before_transition(self) -> None:
        timer = _build(TimerConfig(work_sec=1))
        timer.start()

        self.assertFalse(timer.tick())
        self.assertEqual(0, timer.remaining_sec)
        self.assertEqual(Phase.WORK, timer.phase)

        self.assertTrue(timer.tick())
        self.assertEqual(Phase.BREAK, timer.phase)
        self.assertGreaterEqual(timer.remaining_sec, 0)

    def test_work_expiry_moves_to_break_and_counts(self) -> None:
        recorder = _Recorder()
        timer = _build(TimerConfig(), recorder)
        _run_to_expiry(timer)

        snap = timer.snapshot()
        self.assertEqual(1, snap.completed_work_cycles)
        self.assertEqual(Phase.BREAK, snap.phase)
        self.assertEqual(5 * 60, snap.phase_total_sec)
        self.assertEqual(5 * 60, snap.remaining_sec)
        self.assertFalse(snap.is_running)
        self.assertEqual(
            [("Pomodoro completed", "You have completed 1 pomodoro")],
            recorder.notifications,
        )
        self.assertEqual(Cue.BREAK_RUNNING, recorder.cues[-1])

    def test_fourth_work_expiry_moves_to_long_break(self) -> None:
        recorder = _Recorder()
        timer = _build(TimerConfig(), recorder)
        phases = []
        for _ in range(4):
            _run_to_expiry(timer)  # work
            phases.append(timer.phase)
            if timer.completed_work_cycles < 4:
                _run_to_expiry(timer)  # break

        self.assertEqual(
            [Phase.BREAK, Phase.BREAK, Phase.BREAK, Phase.LONG_BREAK], phases
        )
        self.assertEqual(4, timer.completed_work_cycles)
        self.assertEqual(15 * 60, timer.phase_total_sec)
        self.assertEqual(Cue.LONG_BREAK, recorder.cues[-1])

    def test_break_expiry_returns_to_work_without_counting(self) -> None:
        recorder = _Recorder()
        timer = _build(SHORT, recorder)
        _run_to_expiry(timer)
        _run_to_expiry(timer)

        self.assertEqual(Phase.WORK, timer.phase)
        self.assertEqual(1, timer.completed_work_cycles)
        self.assertEqual(3, timer.remaining_sec)
        self.assertFalse(timer.is_running)
        self.assertEqual(
            ("Starting work phase", "Let's focus on this session. You can do it!"),
            recorder.notifications[-1],
        )

    def test_long_break_follows_updated_count(self) -> None:
        for start_count, interval in ((0, 1), (1, 2), (2, 3), (5, 4), (7, 4)):
            with self.subTest(start_count=start_count, interval=interval):
                config = TimerConfig(work_sec=2, long_break_interval=interval)
                timer = _build(config)
                timer.completed_work_cycles = start_count
                _run_to_expiry(timer)

                expected = (
                    Phase.LONG_BREAK
                    if (start_count + 1) % interval == 0
                    else Phase.BREAK
                )
                self.assertEqual(start_count + 1, timer.completed_work_cycles)
                self.assertEqual(expected, timer.phase)

    def test_non_positive_interval_falls_back_to_four(self) -> None:
        timer = _build(TimerConfig(work_sec=1, long_break_interval=0))
        timer.completed_work_cycles = 3
        _run_to_expiry(timer)
        self.assertEqual(Phase.LONG_BREAK, timer.phase)

    def test_transition_rereads_config(self) -> None:
        current = {"config": SHORT}
        timer = PhaseTimer(config_provider=lambda: current["config"])
        timer.start()
        current["config"] = TimerConfig(work_sec=3, break_sec=7)
        for _ in range(4):
            timer.tick()

        self.assertEqual(Phase.BREAK, timer.phase)
        self.assertEqual(7, timer.phase_total_sec)

    def test_failing_notify_leaves_next_phase_committed(self) -> None:
        cues: list[Cue] = []

        def failing_notify(title: str, message: str) -> None:
            raise RuntimeError("sink down")

        config = TimerConfig(work_sec=1, break_sec=1)
        timer = PhaseTimer(
            config_provider=lambda: config, notify=failing_notify, on_cue=cues.append
        )
        timer.start()
        timer.tick()
        with self.assertRaises(RuntimeError):
            timer.tick()

        snap = timer.snapshot()
        self.assertEqual(Phase.BREAK, snap.phase)
        self.assertEqual(1, snap.remaining_sec)
        self.assertFalse(snap.is_running)
        self.assertEqual(1, snap.completed_work_cycles)
        self.assertEqual(Cue.BREAK_RUNNING, cues[-1])

        timer.start()
        timer.tick()
        with self.assertRaises(RuntimeError):
            timer.tick()

        self.assertEqual(Phase.WORK, timer.phase)
        self.assertEqual(1, timer.completed_work_cycles)

    def test_remaining_never_exceeds_total_or_goes_negative(self) -> None:
        timer = _build(SHORT)
        for _ in range(6):
            timer.start()
            for _ in range(timer.phase_total_sec + 1):
                snap = timer.snapshot()
                self.assertLessEqual(0, snap.remaining_sec)
                self.assertLessEqual(snap.remaining_sec, snap.phase_total_sec)
                timer.tick()


class PhaseTimerDisplayTests(unittest.TestCase):
    def test_display_formats_digits_and_label(self) -> None:
        timer = _build(TimerConfig(work_sec=25 * 60))
        display = timer.display()
        self.assertEqual("25", display.minutes)
        self.assertEqual("00", display.seconds)
        self.assertEqual("25:00", display.clock)
        self.assertEqual(0.0, display.progress)
        self.assertEqual("Work", display.label)

    def test_display_progress_after_ticks(self) -> None:
        timer = _build(TimerConfig(work_sec=4))
        timer.start()
        timer.tick()
        display = timer.display()
        self.assertEqual("00", display.minutes)
        self.assertEqual("03", display.seconds)
        self.assertAlmostEqual(0.25, display.progress)

    def test_long_phase_shows_total_minutes(self) -> None:
        timer = _build(TimerConfig(work_sec=90 * 60))
        self.assertEqual("90:00", timer.display().clock)

    def test_zero_total_gives_zero_progress(self) -> None:
        timer = _build(TimerConfig(work_sec=0))
        display = timer.display()
        self.assertEqual(0.0, display.progress)
        self.assertEqual("00:00", display.clock)

    def test_progress_fraction_is_clamped(self) -> None:
        self.assertEqual(0.0, progress_fraction(5, 0))
        self.assertEqual(0.0, progress_fraction(5, -1))
        self.assertEqual(0.0, progress_fraction(10, 5))
        self.assertEqual(1.0, progress_fraction(0, 5))
        self.assertEqual(0.5, progress_fraction(5, 10))


if __name__ == "__main__":
    unittest.main()
