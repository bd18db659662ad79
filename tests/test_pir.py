import io

import pytest

from fhetoolkit.pir import CloudService, main, query_record


@pytest.mark.parametrize(
    "index, db, expected",
    [
        (0, ["a", "b", "c"], "a"),
        (1, ["x", "y", "z"], "y"),
        (2, ["1", "2", "3"], "3"),
    ],
    ids=["RetrieveFirstRecord", "RetrieveSecondRecord", "RetrieveThirdRecord"],
)
def test_query_record(index, db, expected):
    assert query_record(index, db) == expected


@pytest.mark.parametrize("index", [-1, 3])
def test_query_record_out_of_range(index):
    with pytest.raises(IndexError):
        query_record(index, ["a", "b", "c"])


def test_cloud_service_queries_hosted_data():
    service = CloudService(["x", "y", "z"])
    assert [service.query_record(i) for i in range(3)] == ["x", "y", "z"]


def test_cloud_service_keeps_its_own_copy():
    data = ["a", "b", "c"]
    service = CloudService(data)
    data[0] = "q"
    assert service.query_record(0) == "a"


def test_main_full_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a\nb\nc\n1\n\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Establishing connection." in out
    assert "Result: 'b'." in out
    assert "Closing connection." in out


def test_main_no_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main([]) == 1
    assert "No input provided." in capsys.readouterr().err


def test_main_rejects_bad_record_and_index(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ab\nx\ny\nz\n5\nfoo\n2\n\n"))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "Invalid argument: 'ab'." in captured.err
    assert "Invalid argument: '5'." in captured.err
    assert "Invalid argument: 'foo'." in captured.err
    assert "Result: 'z'." in captured.out