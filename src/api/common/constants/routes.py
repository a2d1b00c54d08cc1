DASHBOARD_PATH = "/dashboard"
INVOICES_PATH = "/dashboard/invoices"
LOGIN_PATH = "/login"
