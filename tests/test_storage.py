from hashbench.benchmark import save_measurements, load_measurements


def test_saved_run_loads_back(harness, tmp_path):
    harness.configure({"MD5", "FaultyOp"}, [1, 10], iterations=4, seed=42)
    harness.run()
    original = harness.measurement_sets()

    path = tmp_path / "results.json"
    save_measurements(original, str(path))
    loaded = load_measurements(str(path))

    assert list(loaded) == list(original)
    for case, mset in original.items():
        assert loaded[case].measurements == mset.measurements
