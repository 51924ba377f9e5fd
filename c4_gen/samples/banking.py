# c4_gen/samples/banking.py
"""The Internet Banking System from the C4 model documentation.

Elements are declared once and reused across diagrams at different levels;
each diagram keeps its own relations.
"""
from __future__ import annotations

from ..diagram import Diagram
from ..elements import Component, Container, Database, DeploymentNode, Person, Property, System
from ..relations import Direction, Step
from ..theme import Palette, Theme

D = Direction

personal_banking_customer = Person(
    "personalBankingCustomer",
    name="Personal Banking Customer",
    description="A customer of the bank with personal bank accounts.",
)

internet_banking_system = System(
    "internetBankingSystem",
    name="Internet Banking System",
    description="Allows customers to view information about their bank accounts and make payments.",
)
email_system = System(
    "emailSystem",
    name="Email System",
    description="The internal Microsoft Exchange e-mail system.",
)
mainframe_banking_system = System(
    "mainframeBankingSystem",
    name="Mainframe Banking System",
    description="Stores all of the core banking information about customers, accounts, transactions, etc.",
)

web_application = Container(
    "webApplication",
    name="Web Application",
    description="Delivers the static content and the Internet banking single page application.",
    technologies=["Java", "Spring MVC"],
)
single_page_application = Container(
    "singlePageApplication",
    name="Single-Page Application",
    description="Provides all of the Internet banking functionality to customers via their web browser.",
    technologies=["Javascript", "Angular"],
)
mobile_app = Container(
    "mobileApp",
    name="Mobile App",
    description="Provides a limited subset of the Internet banking functionality to customers via their mobile device.",
    technologies=["Xamarin"],
)
api_application = Container(
    "apiApplication",
    name="API Application",
    description="Provides Internet banking functionality via a JSON/HTTPS API.",
    technologies=["Java", "Spring MVC"],
)
database = Database(
    "database",
    name="Database",
    description="Stores user registration information, hashed authentication credentials, access logs, etc.",
    technologies=["Oracle Database Schema"],
)

sign_in_controller = Component(
    "signInController",
    name="Sign In Controller",
    description="Allows users to sign in to the Internet Banking System.",
    technologies=["Spring MVC Rest Controller"],
)
security_component = Component(
    "securityComponent",
    name="Security Component",
    description="Provides functionality related to signing in, changing passwords, etc.",
    technologies=["Spring Bean"],
)
reset_password_controller = Component(
    "resetPasswordController",
    name="Reset Password Controller",
    description="Allows users to reset their passwords with a single use URL.",
    technologies=["Spring MVC Rest Controller"],
)
email_component = Component(
    "emailComponent",
    name="E-mail Component",
    description="Sends e-mails to users.",
    technologies=["Spring Bean"],
)
accounts_summary_controller = Component(
    "accountsSummaryController",
    name="Accounts Summary Controller",
    description="Provides customers with a summary of their bank accounts.",
    technologies=["Spring MVC Rest Controller"],
)
mainframe_banking_system_facade = Component(
    "mainframeBankingSystemFacade",
    name="Mainframe Banking System Facade",
    description="A facade onto the mainframe banking system.",
    technologies=["Spring Bean"],
)


def gen_basic() -> Diagram:
    d = Diagram("Basic")
    d.add_element(internet_banking_system)
    return d


def gen_systems() -> Diagram:
    d = Diagram("Systems Context")
    d.add_elements(
        personal_banking_customer,
        internet_banking_system,
        email_system,
        mainframe_banking_system,
    )

    d.new_relation(
        personal_banking_customer,
        internet_banking_system,
        "Views account balances and makes payments using",
        direction=D.DOWN,
    )
    d.new_relation(internet_banking_system, email_system, "Sends e-mail using", direction=D.RIGHT)
    d.new_relation(
        internet_banking_system,
        mainframe_banking_system,
        "Gets account information from and makes payments using",
        direction=D.DOWN,
    )
    d.new_relation(email_system, personal_banking_customer, "Sends e-mails to", direction=D.UP)
    return d


def gen_containers() -> Diagram:
    boundary = internet_banking_system.boundary()
    boundary.add_elements(
        web_application, single_page_application, mobile_app, database, api_application
    )

    d = Diagram("Containers")
    d.add_elements(personal_banking_customer, boundary, email_system, mainframe_banking_system)

    customer = personal_banking_customer
    d.new_relation(customer, web_application, "Visits bigbank.com/ib using", ["HTTPS"], D.DOWN)
    d.new_relation(
        customer,
        single_page_application,
        "Views account balances and makes payments using",
        direction=D.DOWN,
    )
    d.new_relation(
        customer, mobile_app, "Views account balances and makes payments using", direction=D.DOWN
    )
    d.new_relation(
        web_application,
        single_page_application,
        "Delivers to the customer's web browser",
        direction=D.RIGHT,
    )
    d.new_relation(single_page_application, api_application, "Makes API calls to", ["JSON/HTTPS"], D.DOWN)
    d.new_relation(mobile_app, api_application, "Makes API calls to", ["JSON/HTTPS"], D.DOWN)
    d.new_relation(api_application, database, "Reads from and writes to", ["SQL/TCP"], D.LEFT)
    d.new_relation(api_application, email_system, "Sends e-mail using", direction=D.UP)
    d.new_relation(
        api_application, mainframe_banking_system, "Makes API calls to", ["XML/HTTPS"], D.RIGHT
    )
    d.new_relation(email_system, customer, "Sends e-mails to", direction=D.UP)
    return d


def gen_components() -> Diagram:
    boundary = api_application.boundary()
    boundary.add_elements(
        sign_in_controller,
        reset_password_controller,
        accounts_summary_controller,
        security_component,
        email_component,
        mainframe_banking_system_facade,
    )

    d = Diagram("Components")
    d.add_elements(
        single_page_application,
        mobile_app,
        boundary,
        database,
        email_system,
        mainframe_banking_system,
    )

    for client in (single_page_application, mobile_app):
        for controller in (sign_in_controller, reset_password_controller, accounts_summary_controller):
            d.new_relation(client, controller, "Makes API calls to", ["JSON/HTTPS"], D.DOWN)

    d.new_relation(sign_in_controller, security_component, "Uses", direction=D.DOWN)
    d.new_relation(reset_password_controller, email_component, "Uses", direction=D.DOWN)
    d.new_relation(reset_password_controller, security_component, "Uses", direction=D.DOWN)
    d.new_relation(accounts_summary_controller, mainframe_banking_system_facade, "Uses", direction=D.DOWN)
    d.new_relation(security_component, database, "Reads from and writes to", ["SQL/TCP"], D.DOWN)
    d.new_relation(email_component, email_system, "Sends e-mail using", direction=D.DOWN)
    d.new_relation(
        mainframe_banking_system_facade,
        mainframe_banking_system,
        "Makes API calls to",
        ["XML/HTTPS"],
        D.DOWN,
    )
    return d


def gen_deployment() -> Diagram:
    tomcat_props = [
        Property("Java Version", "8"),
        Property("Xmx", "512M"),
        Property("Xms", "1024M"),
    ]

    api = Container(
        "api",
        name="API Application",
        description="Provides Internet Banking functionality via a JSON/HTTPS API.",
        technologies=["Java", "Spring MVC"],
    )
    web = Container(
        "web",
        name="Web Application",
        description="Delivers the static content and the Internet Banking single page application.",
        technologies=["Java", "Spring MVC"],
    )
    db = Database(
        "db",
        name="Database",
        description=database.description,
        technologies=["Relational Database Schema"],
    )
    db2 = Database(
        "db2",
        name="Database",
        description=database.description,
        technologies=["Relational Database Schema"],
    )
    mobile = Container(
        "mobile",
        name="Mobile App",
        description="Provides a limited subset of the Internet Banking functionality to customers via their mobile device.",
        technologies=["Xamarin"],
    )
    spa = Container(
        "spa",
        name="Single Page Application",
        description="Provides all of the Internet Banking functionality to customers via their web browser.",
        technologies=["JavaScript", "Angular"],
    )

    api_server = DeploymentNode(
        "dn",
        name="bigbank-api***\tx8",
        node_type="Ubuntu 16.04 LTS",
        description="A web server residing in the web server farm, accessed via F5 BIG-IP LTMs.",
        properties=[Property("Location", "London and Reading")],
        elements=[
            DeploymentNode(
                "apache",
                name="Apache Tomcat",
                node_type="Apache Tomcat 8.x",
                description="An open source Java EE web server.",
                properties=tomcat_props,
                elements=[api],
            )
        ],
    )
    primary_db = DeploymentNode(
        "bigbankdb01",
        name="bigbank-db01",
        node_type="Ubuntu 16.04 LTS",
        description="The primary database server.",
        properties=[Property("Location", "London")],
        elements=[
            DeploymentNode(
                "oracle",
                name="Oracle - Primary",
                node_type="Oracle 12c",
                description="The primary, live database server.",
                elements=[db],
            )
        ],
    )
    secondary_db = DeploymentNode(
        "bigbankdb02",
        name="bigbank-db02",
        node_type="Ubuntu 16.04 LTS",
        description="The secondary database server.",
        properties=[Property("Location", "Reading")],
        elements=[
            DeploymentNode(
                "oracle2",
                name="Oracle - Secondary",
                node_type="Oracle 12c",
                description="A secondary, standby database server, used for failover purposes only.",
                elements=[db2],
            )
        ],
    )
    web_server = DeploymentNode(
        "bb2",
        name="bigbank-web***\tx4",
        node_type="Ubuntu 16.04 LTS",
        description="A web server residing in the web server farm, accessed via F5 BIG-IP LTMs.",
        properties=[Property("Location", "London and Reading")],
        elements=[
            DeploymentNode(
                "apache2",
                name="Apache Tomcat",
                node_type="Apache Tomcat 8.x",
                description="An open source Java EE web server.",
                properties=tomcat_props,
                elements=[web],
            )
        ],
    )
    plc = DeploymentNode(
        "plc",
        name="Live",
        node_type="Big Bank plc",
        description="Big bank plc data center",
        elements=[api_server, primary_db, secondary_db, web_server],
    )
    mob = DeploymentNode(
        "mob", name="Customer's mobile device", node_type="Apple IOS or Android", elements=[mobile]
    )
    comp = DeploymentNode(
        "comp",
        name="Customer's computer",
        node_type="Microsoft Windows or Apple macOS",
        elements=[
            DeploymentNode(
                "browser",
                name="Web Browser",
                node_type="Google Chrome, Mozilla Firefox, Apple Safari or Microsoft Edge",
                elements=[spa],
            )
        ],
    )

    d = Diagram("Deployment Diagram")
    d.add_elements(plc, mob, comp)

    d.new_relation(mobile, api, "Makes API calls to", ["json/HTTPS"], D.DOWN)
    d.new_relation(spa, api, "Makes API calls to", ["json/HTTPS"], D.DOWN)
    d.new_relation(web, spa, "Delivers to the customer's web browser", direction=D.UP)
    d.new_relation(api, db, "Reads from and writes to", ["JDBC"], D.DOWN)
    d.new_relation(api, db2, "Reads from and writes to", ["JDBC"], D.DOWN)
    d.new_relation(db, db2, "Replicates data to", direction=D.RIGHT)
    return d


def gen_dynamic() -> Diagram:
    db = Database(
        "c4",
        name="Database",
        description=database.description,
        technologies=["Relational Database Schema"],
    )
    spa = Container(
        "c1",
        name="Single-Page Application",
        description=single_page_application.description,
        technologies=["Javascript and Angular"],
    )
    api = Container("b", name="API Application")
    security = Component(
        "c3",
        name="Security Component",
        description="Provides functionality Related to signing in, changing passwords, etc.",
        technologies=["Spring Bean"],
    )
    sign_in = Component(
        "c2",
        name="Sign In Controller",
        description=sign_in_controller.description,
        technologies=["Spring MVC Rest Controller"],
    )

    boundary = api.boundary()
    boundary.add_elements(security, sign_in)

    d = Diagram("Dynamic Diagram", legend=True, hide_element_types=True)
    d.add_elements(db, spa, boundary)
    d.add_steps(
        Step(spa, sign_in, "Submits credentials to", ["JSON/HTTPS"], D.RIGHT),
        Step(sign_in, security, "Calls isAuthenticated() on"),
        Step(security, db, "select * from users where username = ?", ["JDBC"], D.RIGHT),
    )
    return d


THEMING_THEME = Theme(
    system=Palette(background_color="red", font_color="white"),
    container=Palette(background_color="blue", font_color="orange"),
    component=Palette(background_color="yellow", font_color="black"),
    person=Palette(background_color="green", font_color="grey"),
)


def gen_theming() -> Diagram:
    d = Diagram("Theming", theme=THEMING_THEME)
    d.add_elements(
        internet_banking_system,
        single_page_application,
        sign_in_controller,
        personal_banking_customer,
    )
    return d
