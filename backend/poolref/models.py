"""
Models: stored references and pool configuration.

StoredReference is what a naming backend persists; PoolConfig is what a
PooledDataSource is built from. PoolConfig aliases (camelCase) are the
property names a reference may carry.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Target type a reference must declare to be turned into a pooled data source.
DATA_SOURCE_TYPE = "DataSource"

# Reserved property: name of another naming entry to wrap instead of connecting directly.
DATA_SOURCE_JNDI = "dataSourceJNDI"


class ProductTypeEnum(str, Enum):
    """Supported database product types (postgres, mysql, trino)."""

    POSTGRES = "postgres"
    MYSQL = "mysql"
    TRINO = "trino"


# ---------------------------------------------------------------------------
# StoredReference - persisted by naming backends, read-only here
# ---------------------------------------------------------------------------


class RefAddr(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    content: Any = None


class StoredReference(BaseModel):
    """
    Opaque record describing how to build an object on lookup.

    - class_name: declared target type (e.g. "DataSource").
    - factory: name of the object factory that knows how to build it.
    - addrs: ordered (type, content) entries; first entry wins per type.
    """

    model_config = ConfigDict(frozen=True)

    class_name: str
    factory: str | None = None
    addrs: list[RefAddr] = Field(default_factory=list)

    def get(self, addr_type: str) -> RefAddr | None:
        for addr in self.addrs:
            if addr.type == addr_type:
                return addr
        return None

    @classmethod
    def from_properties(
        cls,
        class_name: str,
        properties: dict[str, Any],
        *,
        factory: str | None = None,
    ) -> "StoredReference":
        return cls(
            class_name=class_name,
            factory=factory,
            addrs=[RefAddr(type=k, content=v) for k, v in properties.items()],
        )


# ---------------------------------------------------------------------------
# PoolConfig - configuration of one pooled data source
# ---------------------------------------------------------------------------


class PoolConfig(BaseModel):
    """
    Pool configuration. Built from string properties; pydantic coerces types.

    ``data_source`` is not a property: it is attached after construction when
    the pool wraps a delegate data source found by name.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    product_type: ProductTypeEnum | None = Field(default=None, alias="productType")
    host: str | None = None
    port: int | None = None
    database: str | None = None
    username: str | None = None
    password: str | None = Field(default=None, repr=False)
    use_ssl: bool = Field(default=False, alias="useSsl")

    pool_name: str | None = Field(default=None, alias="poolName")
    maximum_pool_size: int | None = Field(default=None, alias="maximumPoolSize", gt=0)
    connection_timeout: int | None = Field(default=None, alias="connectionTimeout", gt=0)
    max_lifetime: float | None = Field(default=None, alias="maxLifetime", gt=0)
    connection_test_query: str = Field(default="SELECT 1", alias="connectionTestQuery")
    connection_init_sql: str | None = Field(default=None, alias="connectionInitSql")
    auto_commit: bool = Field(default=True, alias="autoCommit")
    read_only: bool = Field(default=False, alias="readOnly")

    data_source_jndi: str | None = Field(default=None, alias=DATA_SOURCE_JNDI)
    data_source: Any = Field(default=None, exclude=True)
