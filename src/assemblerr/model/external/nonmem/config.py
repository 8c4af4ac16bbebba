r"""
.. list-table:: Options for the NONMEM target
   :widths: 25 25 50 150
   :header-rows: 1

   * - Option name
     - Default value
     - Type
     - Description
   * - ``problem_title``
     - ``'assemblerr model'``
     - str
     - Title used in $PROBLEM when the model has no "title" meta tag
   * - ``data_file``
     - ``'data.csv'``
     - str
     - Dataset used in $DATA when the model has no "data" meta tag
   * - ``subroutine``
     - ``'ADVAN6'``
     - str
     - ODE solver written in $SUBROUTINES
   * - ``tolerance``
     - ``9``
     - int
     - Number of significant digits requested from the ODE solver
"""

import assemblerr.config as config


class NONMEMConfiguration(config.Configuration):
    module = 'assemblerr.nonmem'
    problem_title = config.ConfigItem(
        'assemblerr model', 'Title used when the model has no "title" meta tag'
    )
    data_file = config.ConfigItem('data.csv', 'Dataset used when the model has no "data" meta tag')
    subroutine = config.ConfigItem('ADVAN6', 'ODE solver written in $SUBROUTINES')
    tolerance = config.ConfigItem(9, 'Number of significant digits requested from the ODE solver')


conf = NONMEMConfiguration()
