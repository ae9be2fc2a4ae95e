from typing import List

from fabrica.core.interfaces.component_factory import ComponentFactory
from fabrica.core.interfaces.device import DeviceFactory
from fabrica.core.interfaces.query import Query
from fabrica.query.builder import QueryBuilder


def render_login_form(factory: ComponentFactory) -> str:
    """Works with any theme; only the factory knows the concrete classes."""
    username = factory.create_input("username", "Username")
    password = factory.create_input("password", "Password")
    submit_btn = factory.create_button("Sign In")
    cancel_btn = factory.create_button("Cancel")
    return "\n".join(
        [
            "<form>",
            username.render(),
            password.render(),
            submit_btn.render(),
            cancel_btn.render(),
            "</form>",
        ]
    )


def exercise_devices(factory: DeviceFactory) -> List[str]:
    smartphone = factory.create_smartphone()
    tablet = factory.create_tablet()
    report = []
    if smartphone.switch_on():
        report.append(f"{smartphone.brand} smartphone rings: {smartphone.ring()}")
    if tablet.switch_on():
        report.append(f"{tablet.brand} tablet on")
    return report


def build_posts_query(builder: QueryBuilder) -> Query:
    return builder.table("posts").select(["id", "title"]).limit(5).finalize()
