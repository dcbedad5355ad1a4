class UnknownPipelineError(KeyError):
    """Raised when a pipeline id outside the fixed catalog is requested."""

    def __init__(self, pipeline_id: object, valid_ids: list[str]):
        self.pipeline_id = pipeline_id
        self.valid_ids = valid_ids
        valid_str = ", ".join(valid_ids)
        super().__init__(f"Unknown pipeline '{pipeline_id}'. Valid pipelines: {valid_str}.")

    def __str__(self) -> str:
        # KeyError.__str__ wraps the message in quotes
        return str(self.args[0])


class EmptyPipelineStepsError(ValueError):
    """Raised when a pipeline descriptor is built without any steps."""

    def __init__(self, pipeline_id: str):
        super().__init__(f"Pipeline '{pipeline_id}' must define at least one step.")


class IncompleteCatalogError(ValueError):
    """Raised when a catalog does not hold exactly one descriptor per pipeline id."""

    def __init__(self, given_ids: list[str], expected_ids: list[str]):
        given_str = ", ".join(given_ids)
        expected_str = ", ".join(expected_ids)
        super().__init__(f"Catalog must define each of [{expected_str}] exactly once, got [{given_str}].")
