"""Encoding of timeless filter groups into `beet list` arguments."""

from smart_cutoff.models import FilterSpec

LIST_COMMAND = "list"
CONTINUATION = ","


def build_list_args(spec: FilterSpec, extra_filter: str | None = None) -> list[str]:
    """Build the argument list for a `beet list` query.

    Groups are emitted in order. The trailing token of every group except the
    final one gets a comma appended, which `beet` reads as "or". Without an
    extra filter the trailing token is the group's own last token:

        (("a", "b", "c"), ("d", "e"), ("f", "g"))
        -> ["list", "a", "b", "c,", "d", "e,", "f", "g"]

    With an extra filter, every group keeps all of its tokens and the extra
    filter takes the trailing slot, so each alternative carries the bound:

        -> ["list", "a", "b", "c", "extra,", "d", "e", "extra,", "f", "g", "extra"]

    Args:
        spec: Timeless filter groups.
        extra_filter: Runtime-only filter such as a date range.

    Returns:
        Arguments to pass after the `beet` program path.
    """
    args = [LIST_COMMAND]
    last_index = len(spec.groups) - 1
    for index, group in enumerate(spec.groups):
        if extra_filter is None:
            *leading, last = group
        else:
            leading, last = list(group), extra_filter
        args.extend(leading)
        args.append(last if index == last_index else f"{last}{CONTINUATION}")
    return args
