"""Sample schema model and templates shared by the test suite and CLI tests."""

from pydantic import BaseModel, Field

from good_codegen import Template, t


class Column(BaseModel):
    name: str
    clr_type: str
    sql_type: str


class Table(BaseModel):
    name: str
    columns: list[Column] = Field(default_factory=list)


class DatabaseSchema(BaseModel):
    tables: list[Table] = Field(default_factory=list)


USERS = Table(
    name="Users",
    columns=[
        Column(name="UserId", clr_type="int", sql_type="int"),
        Column(name="FirstName", clr_type="string", sql_type="nvarchar"),
        Column(name="LastName", clr_type="string", sql_type="nvarchar"),
    ],
)

PRODUCTS = Table(
    name="Products",
    columns=[
        Column(name="ProductId", clr_type="int", sql_type="int"),
        Column(name="Name", clr_type="string", sql_type="nvarchar"),
        Column(name="Price", clr_type="decimal", sql_type="money"),
    ],
)

SCHEMA = DatabaseSchema(tables=[USERS, PRODUCTS])


def poco_template(table: Table) -> Template:
    """Single template; the property lines are joined by hand."""
    properties = "\n".join(
        f"public {column.clr_type} {column.name} {{ get; set; }}"
        for column in table.columns
    )
    return t(
        """
        /// <summary>
        /// POCO for {{ table.name }}
        /// </summary>
        public class {{ table.name }}
        {
            {{ properties }}
        }
        """,
        table=table,
        properties=properties,
    )


class PocoTemplate:
    """Same output as poco_template, with one nested template per column."""

    def render(self, table: Table) -> Template:
        return t(
            """
            /// <summary>
            /// POCO for {{ table.name }}
            /// </summary>
            public class {{ table.name }}
            {
                {{ columns }}
            }
            """,
            table=table,
            columns=[self.render_column(column) for column in table.columns],
        )

    def render_column(self, column: Column) -> Template:
        return t(
            "public {{ column.clr_type }} {{ column.name }} { get; set; }",
            column=column,
        )


class DatabaseTemplate:
    """Whole schema, broken into table and column sub-templates."""

    def render(self, schema: DatabaseSchema) -> Template:
        return t(
            """
            /// Auto-Generated by good-codegen

            namespace MyNamespace
            {
                {{ tables }}
            }
            """,
            tables=[self.render_table(table) for table in schema.tables],
        )

    def render_table(self, table: Table) -> Template:
        return t(
            """
            /// <summary>
            /// POCO for {{ table.name }}
            /// </summary>
            public class {{ table.name }}
            {
                {{ columns }}
            }
            """,
            table=table,
            columns=[self.render_column(table, column) for column in table.columns],
        )

    def render_column(self, table: Table, column: Column) -> Template:
        return t(
            """
            /// <summary>
            /// [dbo].[{{ table.name }}][{{ column.name }}] ({{ column.sql_type }})
            /// </summary>
            public {{ column.clr_type }} {{ column.name }} { get; set; }
            """,
            table=table,
            column=column,
        )


GREETING = t("Hello, {{ name }}!", name="World")
