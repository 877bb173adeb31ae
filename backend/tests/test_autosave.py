import asyncio

import pytest

from notevault.services.autosave import DebouncedSaveController

DELAY = 0.05


class Recorder:
    def __init__(self, fail=False):
        self.saved = []
        self.fail = fail

    async def save(self, content):
        if self.fail:
            raise RuntimeError("store unavailable")
        self.saved.append(content)


@pytest.mark.asyncio
async def test_burst_of_edits_saves_once_with_latest_content():
    state = {"text": ""}
    recorder = Recorder()
    controller = DebouncedSaveController(recorder.save, lambda: state["text"], delay=DELAY)

    for text in ("h", "he", "hel", "hello"):
        state["text"] = text
        controller.touch()
        await asyncio.sleep(DELAY / 5)

    assert recorder.saved == []
    await asyncio.sleep(DELAY * 3)
    await controller.wait_idle()

    assert recorder.saved == ["hello"]
    assert controller.save_count == 1
    assert not controller.pending


@pytest.mark.asyncio
async def test_content_is_read_when_timer_fires():
    state = {"text": "armed"}
    recorder = Recorder()
    controller = DebouncedSaveController(recorder.save, lambda: state["text"], delay=DELAY)

    controller.touch()
    state["text"] = "changed after arming"
    await asyncio.sleep(DELAY * 3)
    await controller.wait_idle()

    assert recorder.saved == ["changed after arming"]


@pytest.mark.asyncio
async def test_separate_quiet_periods_save_separately():
    state = {"text": "one"}
    recorder = Recorder()
    controller = DebouncedSaveController(recorder.save, lambda: state["text"], delay=DELAY)

    controller.touch()
    await asyncio.sleep(DELAY * 3)
    state["text"] = "two"
    controller.touch()
    await asyncio.sleep(DELAY * 3)
    await controller.wait_idle()

    assert recorder.saved == ["one", "two"]


@pytest.mark.asyncio
async def test_no_edits_no_save():
    recorder = Recorder()
    controller = DebouncedSaveController(recorder.save, lambda: "x", delay=DELAY)

    await asyncio.sleep(DELAY * 2)
    await controller.flush()
    await controller.close()

    assert recorder.saved == []


@pytest.mark.asyncio
async def test_close_flushes_pending_edit():
    recorder = Recorder()
    controller = DebouncedSaveController(recorder.save, lambda: "pending", delay=10)

    controller.touch()
    await controller.close()

    assert recorder.saved == ["pending"]
    with pytest.raises(RuntimeError):
        controller.touch()


@pytest.mark.asyncio
async def test_close_without_flush_discards_pending_edit():
    recorder = Recorder()
    controller = DebouncedSaveController(recorder.save, lambda: "pending", delay=DELAY)

    controller.touch()
    await controller.close(flush=False)
    await asyncio.sleep(DELAY * 3)

    assert recorder.saved == []


@pytest.mark.asyncio
async def test_failed_save_is_reported_and_not_retried():
    errors = []
    recorder = Recorder(fail=True)
    controller = DebouncedSaveController(recorder.save, lambda: "x", delay=DELAY, on_error=errors.append)

    controller.touch()
    await asyncio.sleep(DELAY * 3)
    await controller.wait_idle()
    await asyncio.sleep(DELAY * 3)

    assert len(errors) == 1
    assert isinstance(errors[0], RuntimeError)
    assert controller.save_count == 0

    # The next edit starts a fresh cycle
    recorder.fail = False
    controller.touch()
    await asyncio.sleep(DELAY * 3)
    await controller.wait_idle()
    assert recorder.saved == ["x"]
