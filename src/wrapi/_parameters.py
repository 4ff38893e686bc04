from dataclasses import dataclass, replace
from typing import Mapping, Optional


@dataclass(frozen=True)
class Parameters:
    """Helper for assembling the optional parts of a request.

    A descriptor can keep one ``Parameters`` bundle around and return its
    ``headers``, ``query`` and ``form`` from the matching hooks.

    Examples:
        ```python
        params = (
            Parameters()
            .with_headers({"X-Api-Version": "2"})
            .with_query({"page": "1"})
        )
        params.query  # {"page": "1"}
        ```
    """

    headers: Optional[Mapping[str, str]] = None
    query: Optional[Mapping[str, str]] = None
    form: Optional[Mapping[str, str]] = None

    def with_headers(self, headers: Mapping[str, str]) -> "Parameters":
        return replace(self, headers=dict(headers))

    def with_query(self, query: Mapping[str, str]) -> "Parameters":
        return replace(self, query=dict(query))

    def with_form(self, form: Mapping[str, str]) -> "Parameters":
        return replace(self, form=dict(form))
