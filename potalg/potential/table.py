# This file is part of potalg
# Copyright 2010-2017, Daniele Coslovich

"""Tabulation of potentials on a grid of distances."""

import logging

import numpy

from .base import call, cutoff
from .mode import Mode

__all__ = ['tabulate', 'write_table']

_log = logging.getLogger(__name__)


def tabulate(potential, npoints=1000, rmin=0.0, rmax=None, what='uwh'):
    """
    Tabulate `potential` from `rmin` to `rmax`.

    If `rmax` is not given, the cutoff of the potential is used. The
    `what` parameters can be 'u', 'uw', 'uwh': the value, the first and
    the second derivative are returned accordingly, after the grid of
    distances. Points where the potential is singular are set to nan.
    """
    if rmax is None:
        rmax = cutoff(potential)
        if numpy.isinf(rmax):
            raise ValueError('rmax is needed to tabulate a cutoff-less potential')
    if what not in ['u', 'uw', 'uwh']:
        raise ValueError('unknown tabulation %s' % what)

    modes = [Mode.VALUE, Mode.D, Mode.DD][:len(what)]
    r = numpy.linspace(rmin, rmax, npoints)
    table = numpy.ndarray((len(modes), npoints))
    for i in range(npoints):
        for j, mode in enumerate(modes):
            try:
                table[j, i] = call(potential, mode, float(r[i]))
            except ZeroDivisionError:
                table[j, i] = float('nan')

    nan = numpy.isnan(table).any(axis=0).sum()
    if nan > 0:
        _log.warning('%s is singular at %d points', potential, nan)
    _log.info('tabulated %s with %d points in [%g, %g]', potential, npoints, rmin, rmax)
    return (r, ) + tuple(table)


def write_table(potential, npoints=1000, rmin=0.0, rmax=None, fmt='uwh',
                metadata='', fileout=None, precision=14):
    """
    Write a text table of `potential`.

    With `fmt='uwh'` the columns are r, u, du, ddu, with `fmt='u'`
    only r, u. The table is returned as a string if `fileout` is
    `None`, otherwise it is written to `fileout`.
    """
    columns = {'u': 'r, u', 'uwh': 'r, u, du, ddu'}
    if fmt not in columns:
        raise ValueError('unknown format %s' % fmt)
    data = tabulate(potential, npoints, rmin=rmin, rmax=rmax, what=fmt)
    txt = '# {} columns: {} [{}]\n'.format(metadata, columns[fmt], potential)
    line = ' '.join(['{:.%dg}' % precision] * len(data)) + '\n'
    for row in zip(*data):
        txt += line.format(*row)

    if fileout is None:
        return txt
    else:
        with open(fileout, 'w') as fh:
            fh.write(txt)
