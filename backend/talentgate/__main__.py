"""Command line entry point printing the access matrix of the demo workspace."""

import argparse

from talentgate.common import Capability
from talentgate.config import configure_logging, load_config_from_env
from talentgate.errors import UnknownUserError
from talentgate.navigation import available_views, can_manage_team
from talentgate.permissions import is_allowed
from talentgate.session import Session


def format_access_matrix(session: Session, user_ids: list[str] | None = None) -> str:
    """Render a capability by user table for the given session.

    :param session: The session whose users are listed
    :param user_ids: Restrict the table to these users, all users by default
    :return: The table as text
    :raises UnknownUserError: If a requested user is not registered
    """
    users = (
        [session.get_user(user_id) for user_id in user_ids]
        if user_ids
        else list(session.users)
    )

    label_width = max(len(f"{c.section}.{c.key}") for c in Capability)
    column_width = max(len(user.id) for user in users) + 2

    header = "".join(user.id.ljust(column_width) for user in users)
    lines = [f"{'capability'.ljust(label_width)}  {header}".rstrip()]
    lines.extend(
        f"{f'{c.section}.{c.key}'.ljust(label_width)}  "
        + "".join(
            ("yes" if is_allowed(user, c) else "no").ljust(column_width)
            for user in users
        ).rstrip()
        for c in Capability
    )
    lines.append("")
    for user in users:
        views = ", ".join(available_views(user))
        team = "yes" if can_manage_team(user) else "no"
        lines.append(
            f"{user.id}: {user.name} ({user.role.label}) views=[{views}] team={team}",
        )
    return "\n".join(lines)


def main() -> None:
    """Print which capabilities each demo user is allowed."""
    parser = argparse.ArgumentParser(
        description="Print the access matrix of the demo agency workspace.",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="Path to the environment configuration file.",
    )
    parser.add_argument(
        "--user",
        action="append",
        dest="user_ids",
        help="Only show the user with this id. May be given more than once.",
    )
    args = parser.parse_args()

    config = load_config_from_env(args.env_file)
    configure_logging(config)

    session = Session.seeded(config)
    try:
        print(format_access_matrix(session, args.user_ids))
    except UnknownUserError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
