import io

from deskapps.employees import Employee, EmployeeRegistry, main


def test_add_returns_and_stores():
    reg = EmployeeRegistry()
    emp = reg.add("Ann", 30, "Sales", 5000.0)
    assert list(reg) == [emp]
    assert len(reg) == 1
    assert emp.department == "Sales"


def test_order_preserved():
    reg = EmployeeRegistry()
    reg.add("Ann", 30, "Sales", 1.0)
    reg.add("Bob", 40, "IT", 2.0)
    assert [e.name for e in reg] == ["Ann", "Bob"]


def test_describe_block():
    text = Employee("Ann", 30, "Sales", 5000.5).describe()
    lines = text.splitlines()
    assert lines[0] == "Name: Ann"
    assert lines[1] == "Age: 30"
    assert lines[2] == "Department: Sales"
    assert lines[3] == "Salary: $5000.5"
    assert lines[4] == "-------------------------"


def test_report_header_and_blocks():
    reg = EmployeeRegistry()
    reg.add("Ann", 30, "Sales", 1.0)
    reg.add("Bob", 40, "IT", 2.0)
    report = reg.report()
    assert report.startswith("Employee List:")
    assert all(e.describe() in report for e in reg)


def test_empty_report():
    assert EmployeeRegistry().report() == "Employee List:"


def test_main_session(monkeypatch, capsys):
    text = "1\nAnn Lee\n30\nSales Team\n5000\n2\n7\n3\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Employee added successfully!" in out
    assert "Name: Ann Lee" in out
    assert "Department: Sales Team" in out
    assert "Invalid choice. Please enter a number from 1 to 3." in out
    assert "Exiting..." in out