"""HR Console package.

This package is organized by feature modules (organization, employees, jobs,
training, performance, ...) with a thin Flask controller layer on top of
service/repository layers. The dashboard and KPI aggregation live in
`dashboard` and `kpi` as pure functions over entity collections.
"""
