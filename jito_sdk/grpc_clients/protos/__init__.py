"""
Protocol buffer messages and service stub for the block engine searcher API

The message classes are built from descriptor protos that mirror the .proto
files shipped in this directory (packet.proto, bundle.proto, searcher.proto),
so no protoc step is required at install time. Field numbers and package
names must stay in sync with those files.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_Field = descriptor_pb2.FieldDescriptorProto

SEARCHER_SERVICE = 'searcher.SearcherService'


def _field(name, number, field_type, type_name=None, repeated=False):
    field = _Field(
        name=name,
        number=number,
        type=field_type,
        label=_Field.LABEL_REPEATED if repeated else _Field.LABEL_OPTIONAL,
    )
    if type_name:
        field.type_name = type_name
    return field


def _message(name, *fields):
    return descriptor_pb2.DescriptorProto(name=name, field=list(fields))


def _method(name, input_type, output_type):
    return descriptor_pb2.MethodDescriptorProto(name=name, input_type=input_type, output_type=output_type)


def _file(name, package, messages, dependencies=(), services=()):
    return descriptor_pb2.FileDescriptorProto(
        name=name,
        package=package,
        syntax='proto3',
        dependency=list(dependencies),
        message_type=list(messages),
        service=list(services),
    )


_PACKET_FILE = _file('packet.proto', 'packet', [
    _message(
        'Meta',
        _field('size', 1, _Field.TYPE_UINT64),
        _field('addr', 2, _Field.TYPE_STRING),
        _field('port', 3, _Field.TYPE_UINT32),
        # field 4 (flags) is never set by this client
        _field('sender_stake', 5, _Field.TYPE_UINT64),
    ),
    _message(
        'Packet',
        _field('data', 1, _Field.TYPE_BYTES),
        _field('meta', 2, _Field.TYPE_MESSAGE, '.packet.Meta'),
    ),
])

_BUNDLE_FILE = _file('bundle.proto', 'bundle', [
    _message(
        'Bundle',
        _field('packets', 3, _Field.TYPE_MESSAGE, '.packet.Packet', repeated=True),
    ),
], dependencies=['packet.proto'])

_SEARCHER_FILE = _file('searcher.proto', 'searcher', [
    _message('SendBundleRequest', _field('bundle', 1, _Field.TYPE_MESSAGE, '.bundle.Bundle')),
    _message('SendBundleResponse', _field('uuid', 1, _Field.TYPE_STRING)),
    _message('GetTipAccountsRequest'),
    _message('GetTipAccountsResponse', _field('accounts', 1, _Field.TYPE_STRING, repeated=True)),
], dependencies=['bundle.proto'], services=[
    descriptor_pb2.ServiceDescriptorProto(name='SearcherService', method=[
        _method('SendBundle', '.searcher.SendBundleRequest', '.searcher.SendBundleResponse'),
        _method('GetTipAccounts', '.searcher.GetTipAccountsRequest', '.searcher.GetTipAccountsResponse'),
    ]),
])

_pool = descriptor_pool.DescriptorPool()
for _file_proto in (_PACKET_FILE, _BUNDLE_FILE, _SEARCHER_FILE):
    _pool.AddSerializedFile(_file_proto.SerializeToString())


def _message_class(full_name):
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(full_name))


Meta = _message_class('packet.Meta')
Packet = _message_class('packet.Packet')
Bundle = _message_class('bundle.Bundle')
SendBundleRequest = _message_class('searcher.SendBundleRequest')
SendBundleResponse = _message_class('searcher.SendBundleResponse')
GetTipAccountsRequest = _message_class('searcher.GetTipAccountsRequest')
GetTipAccountsResponse = _message_class('searcher.GetTipAccountsResponse')


class SearcherServiceStub(object):
    """Client stub for searcher.SearcherService"""

    def __init__(self, channel):
        self.SendBundle = channel.unary_unary(
            f'/{SEARCHER_SERVICE}/SendBundle',
            request_serializer=SendBundleRequest.SerializeToString,
            response_deserializer=SendBundleResponse.FromString,
        )
        self.GetTipAccounts = channel.unary_unary(
            f'/{SEARCHER_SERVICE}/GetTipAccounts',
            request_serializer=GetTipAccountsRequest.SerializeToString,
            response_deserializer=GetTipAccountsResponse.FromString,
        )


__all__ = [
    'SEARCHER_SERVICE',
    'Meta',
    'Packet',
    'Bundle',
    'SendBundleRequest',
    'SendBundleResponse',
    'GetTipAccountsRequest',
    'GetTipAccountsResponse',
    'SearcherServiceStub',
]
