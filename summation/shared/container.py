# summation\shared\container.py
from dependency_injector import containers, providers

from summation.core.use_cases.compute_sum import ComputeSum

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    Tests override providers here instead of patching modules.
    """

    # Use Cases (Application Logic)
    # Factory: a new, stateless instance for every request.
    compute_sum_use_case = providers.Factory(ComputeSum)

# Instantiate the container for global access (e.g. by FastAPI and the CLI)
container = Container()
