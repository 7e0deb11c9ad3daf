from ..exceptions import UnmetRequirements


def assert_publishable(*, section_count: int, component_count: int) -> None:
    if section_count == 0:
        raise UnmetRequirements(
            "Cannot publish portfolio without sections.",
            details={"section_count": section_count},
        )

    if component_count == 0:
        raise UnmetRequirements(
            "Cannot publish portfolio without components.",
            details={"component_count": component_count},
        )
