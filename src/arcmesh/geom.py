## foundational scalar and vector library for arcmesh
## Copyright (c) 2020 Richard DeVaul

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""foundational scalar and vector operations for **arcmesh**

====================
OVERVIEW
====================

The arcmesh.geom module provides the constants, scalar operations and
vector operations that the rest of **arcmesh** is built on.

constants
=========

arcmesh.geom provides the "constants" ``epsilon`` and ``pi2`` (2*pi).
Redefine these at your peril.

scalars
=======

Scalars are ordinary Python3 ``int`` or ``float`` numbers.  The
empirically-chosen value of ``epsilon`` of 5E-6 reflects double
precision limitations for the kinds of computations done here.

vectors and points
==================

vectors are defined as a list of four numbers, i.e. ``[x,y,z,w]``,
where the w coordinate is a homogeneous normalization factor.  Most
operations ignore w and operate as though w=1.  A point is a vector
with w > 0, made with ``point()``: ::

   pnt1 = point(0,0)
   pnt2 = point(2.0,-2.0,5.0)
   pnt3 = [1.0, 2.0, 3.0, 1.0]

Two conventions are used in **arcmesh**:

* path geometry (arcs, tangent edges, curves of arcs) lives in the z=0
  plane, so a 2D point is just ``point(x,y)``.

* mesh geometry (polyhedra, planes, slicing) is *y-up*: the y
  coordinate of a point is its height.

"""

import copy
from math import *

## constants
## ---------

epsilon=0.000005
pi2 = 2.0*pi

## operations on scalars
## ---------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

def close(a,b):
    """ are two scalars the same within epsilon
    """
    return abs(a-b) < epsilon

def lerp(a,b,u):
    """ linear interpolation from ``a`` (u=0) to ``b`` (u=1), unclamped"""
    return a + (b-a)*u

def inverse_lerp(a,b,x):
    """ parameter ``u`` such that ``lerp(a,b,u) == x``, unclamped"""
    return (x-a)/(b-a)

## floored modulus.  Python's % already takes the sign of the
## divisor, but the result can round up to exactly m for tiny negative
## x, so fold that case back to zero
def mod(x,m):
    """ non-negative remainder of ``x`` modulo positive ``m``"""
    r = x % m
    if r >= m:
        r = 0.0
    return r

def normalise_angle_positive_rad(a):
    """ map an angle in radians onto [0, 2pi)"""
    return mod(a,pi2)


## operations on vectors
## ------------------------


def vect(a=False,b=False,c=False,d=False):
    """Convenience function for making a homogeneous coordinates 4 vector
from practically anything
    """
    r = [0,0,0,1]
    if isgoodnum(a):
        r[0]=a
        if isgoodnum(b):
            r[1]=b
            if isgoodnum(c):
                r[2]=c
                if isgoodnum(d):
                    r[3]=d
    elif isinstance(a,(tuple,list)):
        for i in range(min(4,len(a))):
            x=a[i]
            if isgoodnum(x):
                r[i]=x
    return r

## determine if two vectors are the same, to within epsilon
def vclose(a,b):
    return close(mag(sub(a,b)),0)

def isvect(x):
    """
    check to see if argument is a proper vector for our purposes
    """
    return isinstance(x,list) and len(x) == 4 and isgoodnum(x[0]) and isgoodnum(x[1]) and isgoodnum(x[2]) and isgoodnum(x[3])

## R^3 -> R^3 functions: ignore w component
## ------------------------------------------------
def add(a,b):
    """ 3 vector, `a + b`"""
    return [a[0]+b[0],a[1]+b[1],a[2]+b[2],1.0]

def sub(a,b):
    """ 3 vector, `a - b`"""
    return [a[0]-b[0],a[1]-b[1],a[2]-b[2],1.0]

def scale3(a,c):
    """ 3 vector, vector ''a'' times scalar ``c``, `a * c`"""
    return [a[0]*c,a[1]*c,a[2]*c,1.0]

def vlerp(a,b,u):
    """ component-wise linear interpolation between points ``a`` and ``b``"""
    return [lerp(a[0],b[0],u),lerp(a[1],b[1],u),lerp(a[2],b[2],u),1.0]

def cross(a,b):
    """Compute the cross generalized product of a x b, assuming that both
    fall into the w=1 hyperplane

    """

    return [ a[1]*b[2] - a[2]*b[1],
             a[2]*b[0] - a[0]*b[2],
             a[0]*b[1] - a[1]*b[0],
             1.0 ]

## R^3 -> R functions -- ignore w component
## ----------------------------------------
def dot(a,b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

def dist(a,b):
    """ compute the euclidean distance between two 3 vector points ``a`` and ``b``"""
    return mag(sub(a,b))

def norm(a):
    """ unit vector in the direction of ``a``; raises ``ValueError``
    for a zero-length vector"""
    m = mag(a)
    if m == 0.0:
        raise ValueError('norm: zero-length vector')
    return scale3(a,1.0/m)


## operations in the x-y plane
## ---------------------------

## NOTE: these functions assume that a lies in the x,y plane.  If this
## is not the case, the results are bogus.
def rotate_left_90(a):
    """ rotate an XY vector counter-clockwise by 90 degrees"""
    return [ -a[1], a[0], 0, 1.0 ]

def rotate_right_90(a):
    """ rotate an XY vector clockwise by 90 degrees"""
    return [ a[1], -a[0], 0, 1.0 ]

def angle_from_vec2(a):
    """ angle of an XY vector in radians, normalised onto [0, 2pi)"""
    return normalise_angle_positive_rad(atan2(a[1],a[0]))

def vec2_from_angle(a):
    """ unit XY vector at angle ``a`` (radians)"""
    return [ cos(a), sin(a), 0, 1.0 ]


deepcopy = copy.deepcopy

# pretty printing string formatter for vectors and lists of vectors.
# You can use this anywhere you use str(), since it will fall back to
# str() if the argument isn't a vector
def vstr(a):
    """ utility function for recursively checking and formatting lists
    """
    if not isinstance(a,list):
        return str(a)
    if isvect(a):
        if abs(a[3]-1.0) > epsilon: # not in w=1
            return "[{}, {}, {}, {}]".format(a[0],a[1],a[2],a[3])
        elif abs(a[2]) > epsilon: # not in z=0
            return "[{}, {}, {}]".format(a[0],a[1],a[2])
        else: # in x-y plane
            return "[{}, {}]".format(a[0],a[1])
    if len(a) > 0 and all(isinstance(x,list) for x in a):
        return "[" + ", ".join(vstr(x) for x in a) + "]"
    return str(a)


## operations on points
## --------------------

## points are defined as vectors that lie in a positive, non-zero
## hyperplane, i.e. [x, y, z, w] such that w > 0.

def point(x=False,y=False,z=False,w=False):
    """Point creation from point or scalars"""
    if ispoint(x):
        return deepcopy(x)
    r = [0,0,0,1]
    if isgoodnum(x):
        r[0]=x
        if isgoodnum(y):
            r[1]=y
            if isgoodnum(z):
                r[2]=z
                if isgoodnum(w):
                    r[3]=w
    if r[3] > 0:
        return r
    else:
        raise ValueError('bad w argument to point()')


def ispoint(x):
    """ is it a point?"""
    if isvect(x) and x[3] > 0.0:
        return True
    return False

## coerce a point, or an (x,y) or (x,y,z) sequence, into a new point
def topoint(a):
    """ new point from a point or a 2 or 3 element sequence of numbers"""
    if ispoint(a):
        return deepcopy(a)
    if isinstance(a,(tuple,list)) and len(a) in (2,3) and all(isgoodnum(x) for x in a):
        return vect(list(a))
    raise ValueError("can't make a point from {}".format(a))


## triangle helpers
## ----------------

def triangle_normal(a,b,c):
    """Return the unit normal of triangle ``a, b, c`` (right-hand rule),
    or ``None`` for a degenerate triangle."""
    n = cross(sub(b,a),sub(c,a))
    length = mag(n)
    if length < epsilon*epsilon:
        return None
    return scale3(n,1.0/length)

def triangle_area(a,b,c):
    """ area of the 3D triangle ``a, b, c``"""
    return 0.5*mag(cross(sub(b,a),sub(c,a)))
