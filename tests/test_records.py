import pytest

from labtrees.records import (
    Employee,
    EmployeeFile,
    Student,
    StudentFile,
    STUDENT_RECORD_SIZE,
    INDEX_RECORD_SIZE,
)

STUDENTS = [
    Student("asha", 1, 10, "pune"),
    Student("ravi", 2, 11, "mumbai"),
    Student("meena", 3, 10, "nashik"),
]

EMPLOYEES = [
    Employee("kiran", 101, 5000, "clerk"),
    Employee("lata", 102, 7000, "manager"),
    Employee("om", 103, 6000, "engineer"),
]


@pytest.fixture
def students(tmp_path):
    sf = StudentFile(tmp_path / "STUDENT.dat")
    sf.create(STUDENTS)
    return sf


@pytest.fixture
def employees(tmp_path):
    ef = EmployeeFile(tmp_path / "EMP.dat", tmp_path / "IND.dat")
    ef.create(EMPLOYEES)
    return ef


def test_student_round_trip(students):
    assert students.records() == STUDENTS


def test_student_record_size(students):
    assert STUDENT_RECORD_SIZE == 72
    assert students.path.stat().st_size == STUDENT_RECORD_SIZE * len(STUDENTS)


def test_student_search(students):
    assert students.search(2) == 1
    assert students.search(99) is None


def test_student_update(students):
    replacement = Student("ravi", 20, 12, "thane")
    students.update(2, replacement)
    assert students.records() == [STUDENTS[0], replacement, STUDENTS[2]]
    assert students.search(2) is None
    assert students.search(20) == 1


def test_student_delete(students):
    students.delete(1)
    assert students.records() == STUDENTS[1:]
    assert students.search(1) is None
    assert students.path.stat().st_size == STUDENT_RECORD_SIZE * len(STUDENTS)


def test_student_missing_raises(students):
    with pytest.raises(KeyError):
        students.update(42, Student("x", 42, 1, "y"))
    with pytest.raises(KeyError):
        students.delete(42)


def test_student_append(students):
    extra = Student("neha", 4, 12, "nagpur")
    students.append(extra)
    assert students.records() == STUDENTS + [extra]
    assert students.search(4) == 3


def test_student_name_too_long(tmp_path):
    sf = StudentFile(tmp_path / "s.dat")
    with pytest.raises(ValueError):
        sf.create([Student("abcdefghij", 1, 1, "x")])


def test_student_missing_file_is_empty(tmp_path):
    assert StudentFile(tmp_path / "none.dat").records() == []


def test_employee_round_trip(employees):
    assert employees.records() == EMPLOYEES


def test_employee_index_size(employees):
    assert INDEX_RECORD_SIZE == 8
    assert employees.index_path.stat().st_size == INDEX_RECORD_SIZE * len(EMPLOYEES)


def test_employee_search(employees):
    assert employees.search(102) == EMPLOYEES[1]
    assert employees.search(999) is None


def test_employee_update_keeps_designation(employees):
    employees.update(103, "omkar", 6500)
    assert employees.search(103) == Employee("omkar", 103, 6500, "engineer")


def test_employee_delete(employees):
    employees.delete(101)
    assert employees.search(101) is None
    assert employees.records() == EMPLOYEES[1:]
    with pytest.raises(KeyError):
        employees.delete(101)


def test_employee_update_missing(employees):
    with pytest.raises(KeyError):
        employees.update(555, "nobody", 1)


def test_employee_append(employees):
    extra = Employee("zoya", 104, 8000, "lead")
    employees.append(extra)
    assert employees.search(104) == extra
    assert employees.records() == EMPLOYEES + [extra]


def test_employee_append_after_delete(employees):
    employees.delete(102)
    extra = Employee("zoya", 104, 8000, "lead")
    employees.append(extra)
    assert employees.records() == [EMPLOYEES[0], EMPLOYEES[2], extra]


def test_employee_designation_too_long(tmp_path):
    ef = EmployeeFile(tmp_path / "e.dat", tmp_path / "i.dat")
    with pytest.raises(ValueError):
        ef.append(Employee("a", 1, 1, "x" * 20))