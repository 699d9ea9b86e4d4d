"""Unit tests for the option builder."""

from __future__ import annotations

import pytest

from kf_cli.core.options import FieldOption
from kf_cli.services.apps import (
    DeleteOptions,
    ListOptions,
    delete_option_defaults,
    list_option_defaults,
    with_delete_namespace,
    with_list_label_selector,
    with_list_namespace,
)
from kf_cli.services.instances import (
    CreateServiceOptions,
    create_service_option_defaults,
    with_create_service_params,
)
from kf_cli.services.secrets import (
    CreateOptions,
    with_create_data,
    with_create_labels,
)


@pytest.mark.unit
class TestToConfig:
    """Tests for resolving options into a config."""

    def test_empty_sequence_yields_zero_values(self) -> None:
        """No options should leave every field at its zero value."""
        cfg = ListOptions().to_config()

        assert cfg.namespace == ""
        assert cfg.label_selector == ""
        assert cfg.app_name == ""
        assert cfg.timeout is None

    def test_later_option_overrides_earlier(self) -> None:
        """Options are applied left to right."""
        opts = ListOptions(with_list_namespace("a"), with_list_namespace("b"))

        assert opts.to_config().namespace == "b"

    def test_unset_fields_keep_zero_value(self) -> None:
        """Setting one field should not touch the others."""
        cfg = ListOptions(with_list_label_selector("env=prod")).to_config()

        assert cfg.label_selector == "env=prod"
        assert cfg.namespace == ""

    def test_to_config_returns_fresh_record(self) -> None:
        """Each resolution builds an independent config."""
        opts = ListOptions(with_list_namespace("a"))

        first = opts.to_config()
        first.namespace = "mutated"

        assert opts.to_config().namespace == "a"

    def test_values_are_deep_copied(self) -> None:
        """Mutating the caller's value after building must not leak into configs."""
        params = {"ram_gb": 4, "nested": {"disk": 10}}
        opts = CreateServiceOptions(with_create_service_params(params))

        params["nested"]["disk"] = 99
        cfg = opts.to_config()
        cfg.params["ram_gb"] = 8

        assert cfg.params["nested"]["disk"] == 10
        assert opts.to_config().params == {"ram_gb": 4, "nested": {"disk": 10}}

    def test_bytes_and_mapping_values(self) -> None:
        """Secret create options carry byte payloads and label maps."""
        cfg = CreateOptions(
            with_create_data({"cert": b"\x00\x01"}),
            with_create_labels({"env": "prod"}),
        ).to_config()

        assert cfg.data == {"cert": b"\x00\x01"}
        assert cfg.labels == {"env": "prod"}


@pytest.mark.unit
class TestExtend:
    """Tests for combining option sequences."""

    def test_extend_does_not_modify_either_sequence(self) -> None:
        """extend should return a new sequence."""
        base = DeleteOptions(with_delete_namespace("a"))
        other = [with_delete_namespace("b")]

        combined = base.extend(other)

        assert len(base) == 1
        assert len(other) == 1
        assert len(combined) == 2
        assert base.to_config().namespace == "a"
        assert combined.to_config().namespace == "b"

    def test_extend_preserves_type(self) -> None:
        """The result keeps the family of the receiver."""
        combined = delete_option_defaults("x").extend([])

        assert isinstance(combined, DeleteOptions)
        assert combined.namespace == "x"

    def test_extend_is_associative(self) -> None:
        """(a + b) + c resolves like a + (b + c)."""
        a = ListOptions(with_list_namespace("a"))
        b = ListOptions(with_list_label_selector("tier=web"))
        c = ListOptions(with_list_namespace("c"))

        left = (a + b) + c
        right = a + (b + c)

        assert left == right
        assert left.to_config() == right.to_config()

    def test_empty_sequence_is_identity(self) -> None:
        """Extending with nothing changes nothing."""
        a = ListOptions(with_list_namespace("a"))

        assert a.extend([]) == a
        assert ListOptions().extend(a) == a

    def test_sequences_are_unhashable(self) -> None:
        """Equality is by value, so sequences cannot be set members or keys."""
        a = CreateServiceOptions(with_create_service_params({"ram_gb": 4}))

        assert a == CreateServiceOptions(with_create_service_params({"ram_gb": 4}))
        with pytest.raises(TypeError):
            hash(a)


@pytest.mark.unit
class TestDefaults:
    """Tests for option defaults and accessors."""

    def test_defaults_use_process_default_namespace(self) -> None:
        """Defaults target the 'default' namespace."""
        assert list_option_defaults().namespace == "default"
        assert delete_option_defaults().namespace == "default"
        assert create_service_option_defaults().to_config().namespace == "default"

    def test_defaults_accept_namespace(self) -> None:
        """Defaults can be built for another namespace."""
        assert list_option_defaults("team-a").namespace == "team-a"

    def test_accessors_report_resolved_values(self) -> None:
        """Accessors reflect the fully applied sequence."""
        opts = list_option_defaults().extend(
            [with_list_namespace("prod"), with_list_label_selector("env=prod")]
        )

        assert opts.namespace == "prod"
        assert opts.label_selector == "env=prod"
        assert opts.app_name == ""

    def test_field_option_equality(self) -> None:
        """Options with the same field and value compare equal."""
        assert with_list_namespace("a") == FieldOption("namespace", "a")
        assert with_list_namespace("a") != with_list_namespace("b")
