"""Validation rules for user list paging options."""
from src.app.core.domain.models import GetAllUsersOptions
from src.shared.validation.rules import BaseValidator

MIN_PAGE = 1
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 25


class GetAllUsersOptionsValidator(BaseValidator[GetAllUsersOptions]):

    def __init__(self) -> None:
        super().__init__()

        (self.rule_for("page", lambda o: o.page)
            .greater_than_or_equal_to(MIN_PAGE).with_message("The minimum page is 1."))

        (self.rule_for("pageSize", lambda o: o.page_size)
            .inclusive_between(MIN_PAGE_SIZE, MAX_PAGE_SIZE)
            .with_message("The size of the page must be between 1 and 25."))
