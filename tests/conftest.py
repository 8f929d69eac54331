"""Shared fixtures: schema files in the shape an admin frontend keeps them."""

from __future__ import annotations

from pathlib import Path

import pytest

USER_QUERY_SCHEMA = """\
// query conditions for the user list
import moment from 'moment';

/*
 * generated by the frontend scaffold
 */
module.exports = [
  {
    key: 'id',
    title: 'ID',
    dataType: 'int',
    showType: 'between',  // id range
    defaultValue: '{a: 1}',
  },
  {
    key: 'name',
    title: 'user name',
    dataType: 'varchar',
  },
  {
    key: 'type',
    dataType: 'varchar',
    showType: 'checkbox',
    options: [{ key: 'a', value: 'A' }, { key: 'b', value: 'B' }],
  },
  {
    key: 'score',
    dataType: 'float',
    showType: 'multiSelect',
    options: [
      {
        key: '1',
        value: 'one',
      },
    ],
  },
  {
    key: 'gmtCreate',
    dataType: 'datetime',
    showType: 'between',
  },
];
"""

USER_DATA_SCHEMA = """\
module.exports = [
  {
    key: 'id',
    dataType: 'int',
    primary: true,
  },
  {
    key: 'avatar',
    dataType: 'varchar',
    showType: 'image',
  },
  {
    key: 'attachments',
    dataType: 'varchar',
    showType: 'file',
    max: 5,
  },
  {
    key: 'photos',
    dataType: 'varchar',
    showType: 'imageArray',
  },
  {
    key: 'weight',
    dataType: 'double',  // not a known dataType
  },
  {
    key: 'roles',
    dataType: 'int',
    showType: 'multiselect',
  },
  {
    key: 'singleRecordActions',
    showType: 'custom',
  }
];
"""

USER_QUERY_FIELDS = [
    "private Long idBegin;",
    "private Long idEnd;",
    "private String name;",
    "private List<String> type;",
    "private List<Double> score;",
    "private Date gmtCreateBegin;",
    "private Date gmtCreateEnd;",
]

USER_DATA_FIELDS = [
    "private Long id;",
    "private String avatar;",
    "private List<String> attachments;",
    "private List<String> photos;",
    "private List<Long> roles;",
]


def field_lines(java_source: str) -> list[str]:
    """Instance field declarations of a generated VO, in order."""
    return [
        line.strip()
        for line in java_source.splitlines()
        if line.strip().startswith("private ") and "static" not in line
    ]


@pytest.fixture
def schema_dir(tmp_path: Path) -> Path:
    d = tmp_path / "schema"
    d.mkdir()
    (d / "user.querySchema.js").write_text(USER_QUERY_SCHEMA, encoding="utf-8")
    (d / "user.dataSchema.js").write_text(USER_DATA_SCHEMA, encoding="utf-8")
    return d


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    return tmp_path / "output"
