import io
import json

import numpy as np
import pytest

from arc_edges.tableio import iter_records, read_csv, read_json, read_table, write_csv, write_json
from arc_edges.validate import InputValidationError


def test_read_csv_infers_column_types():
    text = "x,y,circular,label\n0,1.5,true,a\n2,3,FALSE,b\n"

    table = read_csv(io.StringIO(text))

    assert table['x'].dtype == float
    assert table['y'].tolist() == [1.5, 3.0]
    assert table['circular'].tolist() == [True, False]
    assert table['label'].tolist() == ['a', 'b']


def test_read_csv_requires_header():
    with pytest.raises(InputValidationError):
        read_csv(io.StringIO(""))


def test_read_json_accepts_rows_and_columns():
    rows = read_json(io.StringIO(json.dumps([{'x': 0.0, 'circular': False}, {'x': 1.0, 'circular': True}])))
    columns = read_json(io.StringIO(json.dumps({'x': [0.0, 1.0], 'circular': [False, True]})))

    for table in (rows, columns):
        assert table['x'].tolist() == [0.0, 1.0]
        assert table['circular'].dtype == bool


@pytest.mark.parametrize(
    'payload',
    ['[{"x": 0}, {"y": 1}]', '[1, 2]', '"edges"', '{not json'],
)
def test_read_json_rejects_malformed_payloads(payload):
    with pytest.raises(InputValidationError):
        read_json(io.StringIO(payload))


def test_read_table_uses_suffix(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("x,y\n1,2\n", encoding="utf-8")

    assert read_table(path)['y'].tolist() == [2.0]
    with pytest.raises(InputValidationError):
        read_table(path, 'xml')


def test_writers_emit_plain_values():
    table = {'x': np.array([0.5, 1.0]), 'group': np.array([0, 1]), 'circular': np.array([True, False])}

    records = list(iter_records(table))
    assert records == [
        {'x': 0.5, 'group': 0, 'circular': True},
        {'x': 1.0, 'group': 1, 'circular': False},
    ]
    assert type(records[0]['group']) is int

    csv_out = io.StringIO()
    write_csv(table, csv_out)
    assert csv_out.getvalue() == "x,group,circular\n0.5,0,true\n1.0,1,false\n"

    json_out = io.StringIO()
    write_json(table, json_out)
    assert json.loads(json_out.getvalue()) == records
