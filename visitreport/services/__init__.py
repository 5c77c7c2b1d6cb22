"""Services for visitreport."""
