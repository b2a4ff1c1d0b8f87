from gridham.core.path import GridPath
from gridham.pipeline.prime_data import check_prime_table, format_prime_paths, generate_prime_paths, write_prime_paths
from gridham.solver.primes import PRIME_TABLE, PrimeTable, acceptable_prime_keys, load_prime_paths


def test_generated_keys_match_shipped_table():
    entries = generate_prime_paths()
    assert sorted(entries) == PRIME_TABLE.keys()
    for (n, m, v, w), path in entries.items():
        assert GridPath(n, m, path).connects(v, w)


def test_written_file_loads_back(tmp_path):
    path = str(tmp_path / "prime_paths.yaml")
    count = write_prime_paths(path)
    assert count == len(PRIME_TABLE)
    table = PrimeTable.from_file(path)
    assert table.keys() == PRIME_TABLE.keys()
    assert check_prime_table(table).ok


def test_format_groups_by_shape():
    entries = load_prime_paths()
    text = format_prime_paths(entries)
    assert text.startswith("# Hamiltonian paths")
    assert "- shape: [4, 5]" in text
    assert "- shape: [3, 2]" not in text


def test_check_report():
    report = check_prime_table(PRIME_TABLE)
    assert report.ok
    assert report.entries == report.required == len(list(acceptable_prime_keys()))

    report = check_prime_table(PrimeTable({}))
    assert not report.ok
    assert report.entries == 0
    assert len(report.missing) == report.required
    assert report.extra == []
