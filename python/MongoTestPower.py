import sys
import pymongo
import InputGenerator
import FixedPointMath
import FixedPointNativePython


from decimal import Decimal


USERNAME      = ''
PASSWORD      = ''
SERVER_NAME   = '127.0.0.1:27017'
DATABASE_NAME = 'test'


MINIMUM_VALUE_BASE = 1 << 64
MAXIMUM_VALUE_BASE = 1 << 128
GROWTH_FACTOR_BASE = 1.5


MINIMUM_VALUE_EXP = -(16 << 64)
MAXIMUM_VALUE_EXP = +(16 << 64)
SAMPLES_COUNT_EXP = 65


TRANSACTION_SUCCESS  = 0
TRANSACTION_FAILURE  = 1
IMPLEMENTATION_ERROR = 2


# The result may be slightly larger than the real value when the exponent is negative
MAXIMUM_RELATIVE_EXCESS = Decimal('1e-15')


def Main():
    username      = USERNAME
    password      = PASSWORD
    server_name   = SERVER_NAME
    database_name = DATABASE_NAME
    for arg in sys.argv[1:]:
        username      = arg[len('username='     ):] if arg.startswith('username='     ) else username
        password      = arg[len('password='     ):] if arg.startswith('password='     ) else password
        server_name   = arg[len('server_name='  ):] if arg.startswith('server_name='  ) else server_name
        database_name = arg[len('database_name='):] if arg.startswith('database_name=') else database_name
    if username and password:
        uri = 'mongodb://{}:{}@{}/{}'.format(username,password,server_name,database_name)
    else:
        uri = 'mongodb://{}/{}'.format(server_name,database_name)
    TestAll(pymongo.MongoClient(uri)[database_name]['pow'])


def TestAll(collection):
    range_base = InputGenerator.ExponentialDistribution(MINIMUM_VALUE_BASE,MAXIMUM_VALUE_BASE,GROWTH_FACTOR_BASE)
    range_exp  = InputGenerator.UniformDistribution    (MINIMUM_VALUE_EXP ,MAXIMUM_VALUE_EXP ,SAMPLES_COUNT_EXP )
    for     base in range_base:
        for exp  in range_exp :
            resultFixedPoint   = Run(FixedPointMath        ,base,exp)
            resultNativePython = FixedPointNativePython.pow(base,exp)
            if resultFixedPoint < 0:
                status = TRANSACTION_FAILURE
                loss = {'absolute':0,'relative':0}
            elif resultFixedPoint > resultNativePython * (1 + MAXIMUM_RELATIVE_EXCESS):
                status = IMPLEMENTATION_ERROR
                loss = {'absolute':0,'relative':0}
            else:
                status = TRANSACTION_SUCCESS
                loss = {'absolute':float(resultNativePython-resultFixedPoint),'relative':1-float(resultFixedPoint/resultNativePython)}
            entry = {
                'base':'{}'.format(base),
                'exp' :'{}'.format(exp ),
                'resultFixedPoint'  :'{}'    .format(resultFixedPoint  ),
                'resultNativePython':'{:.2f}'.format(resultNativePython),
                'status':status,
                'loss'  :loss  ,
            }
            collection.insert_one(entry)
            print(', '.join('{}: {}'.format(key,entry[key]) for key in ['base','exp','resultFixedPoint','resultNativePython','status','loss']))


def Run(module,base,exp):
    try:
        return module.pow(base,exp)
    except Exception:
        return -1


Main()
