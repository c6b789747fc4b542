"""
claims_rbac – claim-based role access control resolution.

Import path convention::

    from claims_rbac.kernel.security import Operation, Task, Role, Rbac
    from claims_rbac.kernel.security import Authorization, Claim, ClaimsIdentity
    from claims_rbac.kernel.errors import InvalidArgumentError
    from claims_rbac.config import RbacSettings, EnvSettingsLoader
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
