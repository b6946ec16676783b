import unittest

from device_info_service.channel.method_channel import BinaryMessenger, ChannelNotFoundError, MethodChannel
from device_info_service.dto.method_call import MethodCall
from device_info_service.dto.method_result import MethodResult


class TestMethodChannel(unittest.TestCase):
    def setUp(self) -> None:
        self.messenger = BinaryMessenger()
        self.channel = MethodChannel(self.messenger, "test.com/echo")

    def test_handler_receives_call(self):
        calls: list[MethodCall] = []

        def handler(call: MethodCall) -> MethodResult:
            calls.append(call)
            return MethodResult.success({"echo": call.method})

        self.channel.set_method_call_handler(handler)
        result = self.messenger.dispatch("test.com/echo", MethodCall(method="hello"))

        self.assertEqual(result.to_response(), {"status": "success", "result": {"echo": "hello"}})
        self.assertEqual([c.method for c in calls], ["hello"])

    def test_channel_without_handler_is_not_implemented(self):
        result = self.channel.invoke_method(MethodCall(method="hello"))
        self.assertEqual(result.status, "not_implemented")

    def test_unregistered_channel_raises(self):
        with self.assertRaises(ChannelNotFoundError) as ctx:
            self.messenger.dispatch("test.com/missing", MethodCall(method="hello"))
        self.assertEqual(ctx.exception.channel_name, "test.com/missing")
        self.assertIsInstance(ctx.exception, LookupError)

    def test_new_channel_is_registered_and_not_implemented(self):
        self.assertEqual(self.messenger.channel_names(), ["test.com/echo"])
        result = self.messenger.dispatch("test.com/echo", MethodCall(method="hello"))
        self.assertEqual(result.to_response(), {"status": "not_implemented"})

    def test_detached_channel_answers_not_implemented(self):
        self.channel.set_method_call_handler(lambda call: MethodResult.success({}))
        self.assertTrue(self.messenger.dispatch("test.com/echo", MethodCall(method="hello")).is_success)

        self.channel.set_method_call_handler(None)

        self.assertEqual(self.messenger.channel_names(), ["test.com/echo"])
        result = self.messenger.dispatch("test.com/echo", MethodCall(method="hello"))
        self.assertEqual(result.status, "not_implemented")

    def test_second_channel_with_same_name_keeps_existing_handler(self):
        self.channel.set_method_call_handler(lambda call: MethodResult.success({"from": "first"}))
        MethodChannel(self.messenger, "test.com/echo")
        result = self.messenger.dispatch("test.com/echo", MethodCall(method="hello"))
        self.assertEqual(result.result, {"from": "first"})

    def test_empty_channel_name_is_rejected(self):
        with self.assertRaises(ValueError):
            MethodChannel(self.messenger, "")


if __name__ == "__main__":
    unittest.main()
