"""Sample data: employees and departments."""

from tinysql.data.loader import run_script
from tinysql.executor.executor import Executor

SAMPLE_SQL = """\
CREATE TABLE employees (emp_id INT, name TEXT, dept_id INT, role TEXT);
INSERT INTO employees VALUES (1, 'Alice', 10, 'engineer');
INSERT INTO employees VALUES (2, 'Bob', 10, 'manager');
INSERT INTO employees VALUES (3, 'Carol', 20, 'engineer');
INSERT INTO employees VALUES (4, 'Dave', 10, 'engineer');
INSERT INTO employees VALUES (5, 'Eve', 20, 'engineer');
CREATE TABLE departments (dept_id INT, dept_name TEXT);
INSERT INTO departments VALUES (10, 'Engineering');
INSERT INTO departments VALUES (20, 'Sales');
"""


def load_sample_data(executor: Executor) -> None:
    """Create the two sample tables through the executor."""
    run_script(executor, SAMPLE_SQL)
