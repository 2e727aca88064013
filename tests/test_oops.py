import copy

from dsakit.oops import Complex, Student


def test_complex_add():
    c1 = Complex(1, 2)
    c2 = Complex(3, 4)
    c1.add(c2)
    assert str(c1) == "4 + 6i"
    assert (c2.real, c2.imaginary) == (3, 4)


def test_complex_multiply():
    c1 = Complex(1, 2)
    c1.multiply(Complex(3, 4))
    assert (c1.real, c1.imaginary) == (-5, 10)
    assert str(c1) == "-5 + 10i"


def test_complex_print_negative_imaginary():
    assert str(Complex(1, -2)) == "1 + -2i"


def test_complex_multiply_by_one_is_identity():
    c = Complex(7, -3)
    c.multiply(Complex(1, 0))
    assert c == Complex(7, -3)


def test_complex_multiply_by_itself():
    c = Complex(2, 3)
    c.multiply(c)
    assert c == Complex(-5, 12)


def test_student_default_constructor():
    s = Student()
    assert s.age is None
    assert s.roll_no is None


def test_student_two_arguments():
    s = Student(10, 20)
    assert (s.age, s.roll_no) == (10, 20)


def test_student_one_argument():
    s = Student(10)
    assert s.age == 10
    assert s.roll_no is None


def test_student_copy_is_equal_and_independent():
    s1 = Student(10, 20)
    s4 = copy.copy(s1)
    assert s4 == s1
    s4.age = 11
    assert s1.age == 10


def test_student_assignment_shares_object():
    s1 = Student()
    s3 = Student(10)
    s3 = s1
    s3.age = 5
    assert s1.age == 5