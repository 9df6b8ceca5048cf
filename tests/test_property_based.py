"""Property-based tests using hypothesis."""

from hypothesis import given, strategies as st

from baseerror import (
    Error,
    apply_options,
    clone,
    is_base_error,
    is_business_error,
    is_system_error,
    new,
    new_code,
    new_system_code,
    new_wrap,
    with_chain,
    with_stack,
)

codes = st.text(max_size=8)
messages = st.text(max_size=40)
labels = st.lists(st.text(max_size=10), max_size=5)


class TestPropertyBased:
    """Property-based tests for invariants."""

    @given(codes, messages)
    def test_short_form_non_empty_iff_code_or_msg(self, code, msg):
        """Property: the rendered text is empty only for an empty code and message."""
        err = Error(msg, code=code)
        assert (str(err) != "") == bool(code or msg)

    @given(codes, messages, st.booleans())
    def test_system_and_business_are_exclusive_and_exhaustive(self, code, msg, system):
        """Property: every structured error is exactly one of system or business."""
        err = new_system_code(code, msg) if system else new_code(code, msg)
        assert is_base_error(err)
        assert is_system_error(err) != is_business_error(err)
        assert is_system_error(err) is system

    @given(codes, messages, st.booleans(), labels)
    def test_clone_preserves_fields(self, code, msg, system, chain):
        """Property: clone copies everything except the stack."""
        cause = ValueError(msg)
        original = Error(msg, code=code, system=system, chain=chain, cause=cause)
        apply_options(original, with_stack(1))

        copy = clone(original)

        assert copy is not None
        assert (copy.code, copy.msg, copy.system, copy.chain, copy.cause) == (code, msg, system, chain, cause)
        assert copy.stack is None

    @given(codes, messages, st.booleans(), labels)
    def test_zero_options_is_identity(self, code, msg, system, chain):
        """Property: applying no options changes nothing."""
        err = Error(msg, code=code, system=system, chain=chain)
        before = (err.code, err.msg, err.system, list(err.chain), err.cause, err.stack)

        assert apply_options(err) is err
        assert (err.code, err.msg, err.system, err.chain, err.cause, err.stack) == before

    @given(messages)
    def test_wrap_uses_underlying_text(self, msg):
        """Property: wrapping keeps the underlying message verbatim."""
        cause = RuntimeError(msg)
        err = new_wrap(cause)
        assert err is not None
        assert err.msg == str(cause)
        assert err.cause is cause

    @given(labels, labels)
    def test_chain_labels_accumulate_in_order(self, first, second):
        """Property: chain options append in the order given."""
        err = new("m", with_chain(*first), with_chain(*second))
        assert err.chain == first + second

    @given(st.integers(), st.text(alphabet="abc", max_size=5))
    def test_message_args_see_final_template(self, number, text):
        """Property: args substitute into the template, never leave it raw."""
        err = new("%d-%s", with_chain("x"))
        err.with_msg_args(number, text)
        assert err.msg == f"{number}-{text}"
