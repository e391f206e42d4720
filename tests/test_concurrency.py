from __future__ import annotations

import threading
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from functools import partial

from savefile.models import NamingConfig
from savefile.writers.file_writer import save


def test_concurrent_thread_saves_get_distinct_names(tmp_path) -> None:
    config = NamingConfig(pattern="{base}_{counter}", base="shot", extension="png")
    workers = 16
    barrier = threading.Barrier(workers)

    def worker(index: int):
        barrier.wait()
        return save(tmp_path, config, f"payload-{index}".encode())

    with ThreadPoolExecutor(max_workers=workers) as pool:
        paths = list(pool.map(worker, range(workers)))

    assert len(set(paths)) == workers
    assert len(list(tmp_path.iterdir())) == workers
    contents = sorted(p.read_bytes() for p in paths)
    assert contents == sorted(f"payload-{i}".encode() for i in range(workers))
    assert sorted(p.name for p in paths) == [f"shot_{i:03d}.png" for i in range(1, workers + 1)]


def test_concurrent_process_saves_get_distinct_names(tmp_path) -> None:
    config = NamingConfig(pattern="{base}-{counter}", base="log", extension="txt", counter_padding=0)
    payloads = [f"process-{i}".encode() for i in range(12)]

    with ProcessPoolExecutor(max_workers=4) as pool:
        paths = list(pool.map(partial(save, str(tmp_path), config), payloads))

    assert len(set(paths)) == len(payloads)
    assert sorted(p.read_bytes() for p in paths) == sorted(payloads)
