import pytest
from arcmesh.geom import *
## unit tests for arcmesh geom.py

class TestPoint:
    """unit tests for point functions"""

    def test_create(self):
        a = point(5,0)
        b = point(0,5,-2)
        c = point(-2.3,4.6,-9.2,0.5)
        bb = point(b)
        assert a == [5,0,0,1]
        assert b == [0,5,-2,1]
        assert c == [-2.3,4.6,-9.2,0.5]
        assert bb == b and bb is not b

    def test_discrimate(self):
        assert ispoint(point(5,0))
        assert not ispoint(vect(1,2,3,-1))
        assert ispoint([0,2,2,1])
        assert not ispoint([1,2])

    def test_topoint(self):
        assert topoint((1,2)) == [1,2,0,1]
        assert topoint([1.5,2,3]) == [1.5,2,3,1]
        p = point(1,2,3)
        assert topoint(p) == p and topoint(p) is not p
        with pytest.raises(ValueError):
            topoint((1,))
        with pytest.raises(ValueError):
            topoint(('a',2))

    def test_format(self):
        assert vstr(point(5,0)) == '[5, 0]'
        assert vstr(point(2,3,2)) == '[2, 3, 2]'
        assert vstr(point(1,2,3,4)) == '[1, 2, 3, 4]'
        assert vstr([point(1,0),point(0,1)]) == '[[1, 0], [0, 1]]'

class TestOperations:
    def test_vect(self):
        a = point(5,0)
        b = point(0,5)
        c = point(-3,-3)
        d = point(1,1)
        assert close(mag(a),5.0)
        assert vclose(add(a,b),point(5,5))
        assert vclose(sub(a,b),point(5,-5))
        assert close(dot(a,b),0)
        assert close(dot(d,c),-6)
        assert vclose(cross(a,b),point(0,0,25))
        assert vclose(cross(b,a),point(0,0,-25))
        assert close(dist(a,b),sqrt(50))
        assert vclose(norm(point(0,3,4)),point(0,0.6,0.8))
        with pytest.raises(ValueError):
            norm(point(0,0,0))

    def test_lerp(self):
        assert close(lerp(2,4,0.5),3)
        assert close(lerp(2,4,1.5),5)
        assert close(inverse_lerp(2,4,3),0.5)
        assert close(inverse_lerp(2,4,0),-1)
        assert vclose(vlerp(point(0,0),point(2,4,6),0.5),point(1,2,3))

    def test_mod(self):
        assert close(mod(7,5),2)
        assert close(mod(-1,5),4)
        assert close(mod(-1e-20,10),0)
        assert 0 <= mod(-12.5,4) < 4

    def test_rotations(self):
        a = point(1,2)
        assert vclose(rotate_left_90(a),point(-2,1))
        assert vclose(rotate_right_90(a),point(2,-1))

class TestAngles:
    def test_angle_from_vec2(self):
        assert close(angle_from_vec2(point(1,0)),0)
        assert close(angle_from_vec2(point(0,1)),pi/2)
        assert close(angle_from_vec2(point(0,-1)),3*pi/2)
        assert vclose(vec2_from_angle(pi/2),point(0,1))

    def test_normalise(self):
        assert close(normalise_angle_positive_rad(-pi/2),3*pi/2)
        assert close(normalise_angle_positive_rad(5*pi),pi)

class TestTriangle:
    def test_normal_and_area(self):
        a = point(0,0,0)
        b = point(1,0,0)
        c = point(0,1,0)
        assert vclose(triangle_normal(a,b,c),point(0,0,1))
        assert close(triangle_area(a,b,c),0.5)
        assert triangle_normal(a,point(1,1,1),point(2,2,2)) is None
