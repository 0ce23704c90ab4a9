from typing import List, Union

from .extraction_error import ExtractionError


class ErrorAccumulator:
    """
    Collects the errors raised or tolerated during a single extraction call.
    Blocking errors end up here too, so the caller sees everything that went wrong.
    """

    def __init__(self):
        self._errors: List[Union[ExtractionError, str]] = []

    def add_error(self, error: Union[ExtractionError, str, None]) -> None:
        if error:
            self._errors.append(error)

    def has_error(self) -> bool:
        return len(self._errors) > 0

    @property
    def errors(self) -> List[Union[ExtractionError, str]]:
        return list(self._errors)

    def get_error_msg(self) -> str:
        return "; ".join(str(err) for err in self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self):
        return iter(list(self._errors))

    def __repr__(self) -> str:
        return f"ErrorAccumulator({self.get_error_msg()!r})"
