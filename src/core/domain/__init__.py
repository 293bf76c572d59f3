"""Deployment values (`models`) and the three error kinds (`errors`)."""
