from wordgrid.ht_demo import main


def test_demo_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Found hi1",
        "Incremented hi1's value to: 2",
        "Did not find: doesnotexist",
        "HT size: 10",
        "HT size: 8",
        "Found hi9",
        "size: 9",
    ]


def test_demo_without_arguments(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.startswith("Found hi1\n")
    assert out.endswith("size: 9\n")