"""Unit tests for the RolesConfig collection."""

from authz_config.domain.entities.plugin_role import PluginRoleConfig
from authz_config.domain.entities.role import DUPLICATE_ROLE_MESSAGE, Role
from authz_config.domain.entities.role_config import RoleConfig
from authz_config.domain.entities.roles_config import RolesConfig
from authz_config.domain.entities.validation_context import ValidationContext


class RecordingRole(RoleConfig):
    """Role variant that remembers the context it was validated with."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.seen_context: ValidationContext | None = None

    def validate(self, validation_context: ValidationContext) -> None:
        self.seen_context = validation_context
        super().validate(validation_context)


def test_validate_flags_duplicate_names_across_variants():
    plugin_role = PluginRoleConfig("Admins", "ldap")
    plain_role = RoleConfig("admins", "bob")
    other = PluginRoleConfig("viewers", "ldap")
    roles = RolesConfig(plugin_role, plain_role, other)

    roles.validate(ValidationContext())

    assert plugin_role.errors.get_all_on("name") == [DUPLICATE_ROLE_MESSAGE]
    assert plain_role.errors.get_all_on("name") == [DUPLICATE_ROLE_MESSAGE]
    assert other.errors.is_empty()
    assert roles.has_errors()


def test_validate_runs_each_role_validation():
    bad = PluginRoleConfig("deployers", "bad id!")
    roles = RolesConfig(bad, RoleConfig("viewers"))

    roles.validate(ValidationContext())

    assert bad.errors.get_all_on("authConfigId") is not None
    assert roles.all_errors().get_all_on("authConfigId") == bad.errors.get_all_on("authConfigId")


def test_validate_passes_collection_in_context():
    role = RecordingRole("admins")
    roles = RolesConfig(role)

    roles.validate(ValidationContext())

    assert role.seen_context.roles is roles
    assert role.seen_context.parent is roles
    assert role.seen_context.previous is not None


def test_valid_collection_has_no_errors():
    roles = RolesConfig(PluginRoleConfig("admins", "ldap"), RoleConfig("viewers", "bob"))

    roles.validate(ValidationContext())

    assert not roles.has_errors()
    assert roles.all_errors().is_empty()


def test_lookups():
    ldap_role = PluginRoleConfig("Admins", "ldap")
    github_role = PluginRoleConfig("devs", "github")
    plain_role = RoleConfig("viewers")
    roles = RolesConfig(ldap_role, github_role, plain_role)

    assert roles.find_by_name("admins") is ldap_role
    assert roles.find_by_name("nobody") is None
    assert roles.plugin_roles() == [ldap_role, github_role]
    assert roles.plugin_roles_for_auth_config("ldap") == [ldap_role]
    assert [str(n) for n in roles.role_names()] == ["Admins", "devs", "viewers"]


def test_add_remove_and_uniqueness():
    roles = RolesConfig()
    role: Role = RoleConfig("admins")

    roles.add(role)
    assert role in roles
    assert roles.is_unique_role_name("ADMINS")

    roles.add(PluginRoleConfig("Admins", "ldap"))
    assert not roles.is_unique_role_name("admins")

    roles.remove(role)
    assert len(roles) == 1
    assert list(roles)[0].name == PluginRoleConfig("admins", "ldap").name


def test_repeated_validation_adds_duplicate_messages_to_both_roles():
    first = RoleConfig("admins")
    second = PluginRoleConfig("Admins", "ldap")
    roles = RolesConfig(first, second)

    roles.validate(ValidationContext())
    roles.validate(ValidationContext())

    assert first.errors.get_all_on("name") == [DUPLICATE_ROLE_MESSAGE] * 2
    assert second.errors.get_all_on("name") == [DUPLICATE_ROLE_MESSAGE] * 2
