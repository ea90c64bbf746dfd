"""Unit tests for label schema construction."""

from druid_exporter.core.labels import LabelSchema, build_label_schemas, label_names


class TestLabelNames:
    """Tests for per-schema label name lists."""

    def test_tag_keys_come_first_in_order(self):
        assert label_names(["env", "app"], LabelSchema.POOL) == ["env", "app", "pool"]

    def test_sql_histogram(self):
        assert label_names(["env"], LabelSchema.SQL_HISTOGRAM) == ["env", "pool", "sql", "le"]

    def test_sql_error(self):
        assert label_names(["env"], LabelSchema.SQL_ERROR) == [
            "env",
            "pool",
            "sql",
            "class",
            "message",
        ]

    def test_uri_schemas(self):
        assert label_names(["env"], LabelSchema.URI) == ["env", "uri"]
        assert label_names(["env"], LabelSchema.URI_HISTOGRAM) == ["env", "uri", "le"]

    def test_no_tags(self):
        assert label_names([], LabelSchema.POOL_HISTOGRAM) == ["pool", "le"]


class TestBuildLabelSchemas:
    """Tests for the precomputed schema table."""

    def test_covers_every_schema(self):
        schemas = build_label_schemas(["env"])
        assert set(schemas) == set(LabelSchema)

    def test_accepts_one_shot_iterables(self):
        schemas = build_label_schemas(iter(["env", "dc"]))
        assert schemas[LabelSchema.POOL] == ["env", "dc", "pool"]
        assert schemas[LabelSchema.SQL] == ["env", "dc", "pool", "sql"]
