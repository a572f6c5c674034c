"""The EV3 large and medium motors and the color and ultrasonic sensors."""